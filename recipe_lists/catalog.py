"""Read-only recipe catalog.

The catalog is loaded once at startup and never mutated afterwards, so it
is safe to share between request threads without locking.
"""

import logging
import math
from typing import Iterable, Iterator, List
from urllib.parse import unquote

from .errors import RecipeNotFound
from .normalize import slugify
from .recipes import load_recipes
from .schemas import Pagination, Recipe, RecipePage

logger = logging.getLogger(__name__)


class RecipeCatalog:
    def __init__(self, recipes: Iterable[Recipe] = ()):
        self._recipes = tuple(recipes)
        # slug of every recipe name, index-aligned with _recipes
        self._slugs = tuple(slugify(r.name) for r in self._recipes)

    @classmethod
    def from_file(cls, path) -> "RecipeCatalog":
        return cls(load_recipes(path))

    def __len__(self) -> int:
        return len(self._recipes)

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self._recipes)

    def paginate(self, page: int, limit: int) -> RecipePage:
        """Return the ``page``-th slice of ``limit`` recipes.

        Raises ``RecipeNotFound`` when the catalog is empty or the page
        starts past the last recipe.
        """
        total = len(self._recipes)
        start = (page - 1) * limit
        if not total or page < 1 or start >= total:
            raise RecipeNotFound("There are no recipes")

        total_pages = math.ceil(total / limit)
        return RecipePage(
            data=list(self._recipes[start:page * limit]),
            pagination=Pagination(
                total_records=total,
                current_page=page,
                total_pages=total_pages,
                next_page=page + 1 if page < total_pages else None,
                prev_page=page - 1 if page > 1 else None,
            ),
        )

    def find_by_slug(self, slug: str) -> Recipe:
        for recipe, recipe_slug in zip(self._recipes, self._slugs):
            if recipe_slug == slug:
                return recipe
        raise RecipeNotFound("There is no recipe with this name")

    def search(self, term: str) -> List[Recipe]:
        """Return recipes whose slugified name contains the slugified term.

        The term may still be percent-encoded; results keep catalog order.
        """
        needle = slugify(unquote(term))
        if not needle:
            return []
        logger.debug("Searching catalog for %r", needle)
        return [
            recipe
            for recipe, recipe_slug in zip(self._recipes, self._slugs)
            if needle in recipe_slug
        ]
