"""Slug derivation for attribute types."""

import re

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Lowercase ``name`` and collapse every non-alphanumeric run to one hyphen.

    >>> slugify("Fabric Weight")
    'fabric-weight'
    >>> slugify("  Multi   Space!! ")
    'multi-space'
    """
    return _NON_ALNUM.sub("-", name.lower()).strip("-")
