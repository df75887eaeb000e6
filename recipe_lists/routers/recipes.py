"""Catalog routes: search, paginated browsing and lookup by slug."""

from typing import Optional

from fastapi import APIRouter, Depends

from ..config import Settings
from ..context import AppContext, get_context, get_settings
from ..schemas import ErrorResponse, Recipe, RecipePage, SearchResults
from ..validators import validate_pagination, validate_search_query, validate_slug

router = APIRouter()

# Bad path parameters on the browse routes are reported as 401.
PATH_VALIDATION_STATUS = 401

BROWSE_ERRORS = {
    PATH_VALIDATION_STATUS: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


@router.get("/search", response_model=SearchResults, responses={400: {"model": ErrorResponse}})
def search_recipes(q: Optional[str] = None, ctx: AppContext = Depends(get_context)):
    term = validate_search_query(q)
    return SearchResults(recipes=ctx.catalog.search(term))


@router.get("/all", response_model=RecipePage, responses=BROWSE_ERRORS)
@router.get("/all/{page}", response_model=RecipePage, responses=BROWSE_ERRORS)
@router.get("/all/{page}/{limit}", response_model=RecipePage, responses=BROWSE_ERRORS)
def list_recipes(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    ctx: AppContext = Depends(get_context),
    settings: Settings = Depends(get_settings),
):
    page_num, limit_num = validate_pagination(
        page,
        limit,
        PATH_VALIDATION_STATUS,
        default_page=settings.default_page,
        default_limit=settings.default_limit,
    )
    return ctx.catalog.paginate(page_num, limit_num)


@router.get("/{slug}", response_model=Recipe, responses=BROWSE_ERRORS)
def get_recipe(slug: str, ctx: AppContext = Depends(get_context)):
    return ctx.catalog.find_by_slug(validate_slug(slug, PATH_VALIDATION_STATUS))
