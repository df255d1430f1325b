"""Small helpers shared by the name-search queries."""

from app.core.errors import ValidationError

LIKE_ESCAPE = "\\"


def require_query(query: str | None) -> str:
    """Return the stripped search term or raise MISSING_QUERY."""
    term = query.strip() if isinstance(query, str) else ""
    if not term:
        raise ValidationError("Search query is required", code="MISSING_QUERY")
    return term


def contains_pattern(term: str) -> str:
    """Build a LIKE pattern matching ``term`` anywhere, with wildcards escaped."""
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"
