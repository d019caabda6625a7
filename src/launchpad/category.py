"""Category type (ordering mode) and its mapping onto item-data roles.

The active sort role is derived from the stored ``CategoryType``; the two
mappings below are inverses of each other so a proxy never needs to infer
its mode from whichever role happens to be active.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict

from .errors import UnknownCategoryTypeError
from .models import AppsRole

__all__ = [
    "CategoryType",
    "sort_role_for",
    "category_type_for_role",
    "parse_category_type",
]


class CategoryType(str, Enum):
    ALPHABETARY = "alphabetary"
    DDE_CATEGORY = "dde_category"


_ROLE_BY_TYPE: Dict[CategoryType, int] = {
    CategoryType.ALPHABETARY: int(AppsRole.TransliteratedRole),
    CategoryType.DDE_CATEGORY: int(AppsRole.DDECategoryRole),
}
_TYPE_BY_ROLE: Dict[int, CategoryType] = {role: ct for ct, role in _ROLE_BY_TYPE.items()}


def sort_role_for(category_type: CategoryType) -> int:
    try:
        return _ROLE_BY_TYPE[category_type]
    except KeyError:
        raise UnknownCategoryTypeError(
            f"no sort role for category type {category_type!r}",
            context={"category_type": category_type},
        ) from None


def category_type_for_role(role: int) -> CategoryType:
    try:
        return _TYPE_BY_ROLE[int(role)]
    except KeyError:
        raise UnknownCategoryTypeError(
            f"role {role!r} does not drive any category type", context={"role": role}
        ) from None


def parse_category_type(value: str | CategoryType) -> CategoryType:
    """Coerce a config/persisted value into a ``CategoryType``."""
    if isinstance(value, CategoryType):
        return value
    try:
        return CategoryType(str(value).strip().lower())
    except ValueError:
        raise UnknownCategoryTypeError(
            f"unknown category type {value!r}", context={"value": value}
        ) from None
