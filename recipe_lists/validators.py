"""Request validators.

Plain functions that check raw path/query/body values and return them
parsed, or raise ``ValidationError``. They know nothing about the catalog
or the list store.
"""

import re
from typing import Any, Optional, Tuple

import pydantic

from .errors import ValidationError
from .schemas import CustomListCreate, Recipe

SLUG_RE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")
_DIGITS_RE = re.compile(r"^[0-9]+$")


def _format_errors(exc: pydantic.ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(x) for x in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def _positive_int(value: Optional[str], field: str, default: int, status_code=None) -> int:
    if value is None or value == "":
        return default
    if not _DIGITS_RE.match(value) or int(value) < 1:
        raise ValidationError(f"{field} must be a positive integer", status_code)
    return int(value)


def validate_pagination(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    status_code: Optional[int] = None,
    default_page: int = 1,
    default_limit: int = 10,
) -> Tuple[int, int]:
    page_num = _positive_int(page, "page", default_page, status_code)
    limit_num = _positive_int(limit, "limit", default_limit, status_code)
    return page_num, limit_num


def validate_slug(slug: Optional[str], status_code: Optional[int] = None) -> str:
    if not slug:
        raise ValidationError("Slug must not be empty", status_code)
    if not SLUG_RE.match(slug):
        raise ValidationError("Invalid slug format", status_code)
    return slug


def validate_search_query(q: Optional[str]) -> str:
    if not isinstance(q, str) or not q:
        raise ValidationError("Invalid or missing query string")
    return q


def validate_recipe(body: Any) -> Recipe:
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a recipe object")
    try:
        return Recipe.model_validate(body)
    except pydantic.ValidationError as exc:
        raise ValidationError(_format_errors(exc)) from exc


def validate_list_create(body: Any) -> CustomListCreate:
    if not isinstance(body, dict):
        raise ValidationError("Request body must be an object with a title")
    try:
        return CustomListCreate.model_validate(body)
    except pydantic.ValidationError as exc:
        raise ValidationError(_format_errors(exc)) from exc


def validate_list_id(list_id: Optional[str]) -> int:
    if not list_id:
        raise ValidationError("List id is required")
    if not _DIGITS_RE.match(list_id) or int(list_id) < 1:
        raise ValidationError("List id must be a positive integer")
    return int(list_id)


def validate_remove_params(list_id: Optional[str], recipe_name: Optional[str]) -> Tuple[int, str]:
    parsed_id = validate_list_id(list_id)
    if not recipe_name:
        raise ValidationError("Recipe name is required")
    return parsed_id, recipe_name
