"""Custom list routes."""

from typing import Any, List

from fastapi import APIRouter, Body, Depends, status

from ..context import AppContext, get_context
from ..schemas import CustomList, ErrorResponse, ListEnvelope, ListsEnvelope
from ..validators import (
    validate_list_create,
    validate_list_id,
    validate_recipe,
    validate_remove_params,
)

router = APIRouter()

LIST_ERRORS = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}


@router.get("", response_model=List[CustomList])
def get_lists(ctx: AppContext = Depends(get_context)):
    return ctx.lists.list_all()


@router.post(
    "",
    response_model=ListEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def create_list(body: Any = Body(None), ctx: AppContext = Depends(get_context)):
    data = validate_list_create(body)
    return ListEnvelope(custom_list=ctx.lists.create(data.title, data.recipe))


@router.delete(
    "/{list_id}/recipes/{recipe_name}",
    response_model=ListsEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses=LIST_ERRORS,
)
def remove_recipe(list_id: str, recipe_name: str, ctx: AppContext = Depends(get_context)):
    parsed_id, slug = validate_remove_params(list_id, recipe_name)
    return ListsEnvelope(lists=ctx.lists.remove_recipe(parsed_id, slug))


@router.post(
    "/{list_id}",
    response_model=ListEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses=LIST_ERRORS,
)
def add_recipe(list_id: str, body: Any = Body(None), ctx: AppContext = Depends(get_context)):
    parsed_id = validate_list_id(list_id)
    recipe = validate_recipe(body)
    return ListEnvelope(custom_list=ctx.lists.add_recipe(parsed_id, recipe))
