from typing import List, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Recipe(BaseModel):
    """A recipe as stored in the catalog and inside custom lists.

    Field names on the wire follow the bundled data set (``Name``,
    ``Ingredients``...); either the alias or the attribute name is
    accepted on input.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field(
        ..., alias="Name", json_schema_extra={"example": "Simple Pancakes"}
    )
    url: str = Field(
        ...,
        json_schema_extra={"example": "https://example.com/simple-pancakes"},
    )
    description: Optional[str] = Field(None, alias="Description")
    author: Optional[str] = Field(None, alias="Author")
    ingredients: List[str] = Field(
        ...,
        alias="Ingredients",
        json_schema_extra={"example": ["flour", "milk", "egg"]},
    )
    method: List[str] = Field(
        ...,
        alias="Method",
        json_schema_extra={
            "example": [
                "Mix dry ingredients",
                "Add wet ingredients",
                "Cook on skillet until golden",
            ]
        },
    )

    @field_validator("url")
    @classmethod
    def url_must_be_absolute(cls, v: str) -> str:
        parsed = urlparse(v)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError("url must be an absolute URL")
        return v


class CustomListCreate(BaseModel):
    title: str = Field(..., min_length=1)
    recipe: Optional[Recipe] = None


class CustomList(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    list_id: int
    title: str
    recipes: List[Recipe] = Field(default_factory=list)


class Pagination(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_records: int
    current_page: int
    total_pages: int
    next_page: Optional[int] = None
    prev_page: Optional[int] = None


class RecipePage(BaseModel):
    data: List[Recipe]
    pagination: Pagination


class SearchResults(BaseModel):
    recipes: List[Recipe]


class ListEnvelope(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    custom_list: CustomList = Field(..., alias="list")


class ListsEnvelope(BaseModel):
    lists: List[CustomList]


class ErrorResponse(BaseModel):
    error: str
