"""Endpoints for the flat vocabularies.

Every vocabulary gets the same five routes (list, search, add, update,
delete) from ``build_catalog_router``; only the schemas and the list
filters differ.
"""

from typing import Any

from fastapi import APIRouter, status
from pydantic import BaseModel, create_model

from app.api.deps import DbSession
from app.schemas import catalog as schemas
from app.schemas.common import CamelModel, MessageResponse
from app.services.catalog import CATALOG_ENTITIES, CatalogEntity, CatalogRepository


def _envelope(name: str, base: type[BaseModel] = CamelModel, **fields: Any) -> type[BaseModel]:
    return create_model(name, __base__=base, **fields)


def build_catalog_router(
    entity: CatalogEntity,
    out_schema: type[BaseModel],
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
) -> APIRouter:
    """Build the CRUD router for one flat vocabulary."""
    router = APIRouter()

    type_name = entity.label.title().replace(" ", "")
    plural_label = entity.plural.replace("_", " ").capitalize()

    ItemResponse = _envelope(
        f"{type_name}Response",
        message=(str, ...),
        **{entity.key: (out_schema, ...)},
    )
    ListResponse = _envelope(
        f"{type_name}ListResponse",
        message=(str, ...),
        **{entity.plural: (list[out_schema], ...)},
    )
    SearchResponse = _envelope(f"{type_name}SearchResponse", ListResponse, query=(str, ...))

    def many(items: list[Any]) -> dict[str, list[Any]]:
        return {entity.plural: [out_schema.model_validate(item) for item in items]}

    @router.get("", response_model=ListResponse, summary=f"List {entity.plural}")
    async def list_items(
        db: DbSession,
        category: str | None = None,
        region: str | None = None,
    ) -> Any:
        given = {"category": category, "region": region}
        filters = {column: given[column] for column in entity.filters}
        items = await CatalogRepository(db, entity).list_items(**filters)
        return ListResponse(message=f"{plural_label} retrieved successfully", **many(items))

    @router.get("/search", response_model=SearchResponse, summary=f"Search {entity.plural}")
    async def search_items(db: DbSession, q: str | None = None) -> Any:
        items = await CatalogRepository(db, entity).search(q)
        return SearchResponse(
            message=f"{entity.label} search completed",
            query=q or "",
            **many(items),
        )

    @router.post(
        "",
        response_model=ItemResponse,
        status_code=status.HTTP_201_CREATED,
        summary=f"Add a {entity.label.lower()}",
    )
    async def add_item(body: create_schema, db: DbSession) -> Any:  # type: ignore[valid-type]
        fields = body.model_dump(mode="json", exclude={"name"}, exclude_none=True)
        item = await CatalogRepository(db, entity).add(body.name, **fields)
        return ItemResponse(
            message=f"{entity.label} added successfully",
            **{entity.key: out_schema.model_validate(item)},
        )

    @router.put(
        "/{item_id}",
        response_model=ItemResponse,
        summary=f"Update a {entity.label.lower()}",
    )
    async def update_item(item_id: int, body: update_schema, db: DbSession) -> Any:  # type: ignore[valid-type]
        fields = body.model_dump(mode="json", exclude={"name"}, exclude_unset=True)
        item = await CatalogRepository(db, entity).update(item_id, name=body.name, **fields)
        return ItemResponse(
            message=f"{entity.label} updated successfully",
            **{entity.key: out_schema.model_validate(item)},
        )

    @router.delete(
        "/{item_id}",
        response_model=MessageResponse,
        summary=f"Delete a {entity.label.lower()}",
    )
    async def delete_item(item_id: int, db: DbSession) -> MessageResponse:
        await CatalogRepository(db, entity).delete(item_id)
        return MessageResponse(message=f"{entity.label} deleted successfully")

    return router


# path, entity key, output schema, create body, update body
CATALOG_ROUTES: list[tuple[str, str, type[BaseModel], type[BaseModel], type[BaseModel]]] = [
    ("/colors", "color", schemas.ColorOut, schemas.ColorCreate, schemas.ColorUpdate),
    ("/materials", "material", schemas.MaterialOut, schemas.MaterialCreate, schemas.MaterialUpdate),
    ("/patterns", "pattern", schemas.PatternOut, schemas.NameOnlyCreate, schemas.NameOnlyUpdate),
    ("/fits", "fit", schemas.FitOut, schemas.NameOnlyCreate, schemas.NameOnlyUpdate),
    ("/sizes", "size", schemas.SizeOut, schemas.SizeCreate, schemas.SizeUpdate),
    ("/standards", "standard", schemas.StandardOut, schemas.StandardCreate, schemas.StandardUpdate),
    (
        "/care-instructions",
        "care_instruction",
        schemas.CareInstructionOut,
        schemas.CareInstructionCreate,
        schemas.CareInstructionUpdate,
    ),
]

router = APIRouter()

for _path, _key, _out, _create, _update in CATALOG_ROUTES:
    router.include_router(
        build_catalog_router(CATALOG_ENTITIES[_key], _out, _create, _update),
        prefix=_path,
        tags=[CATALOG_ENTITIES[_key].label],
    )
