"""In-memory store for user-defined recipe lists.

FastAPI runs synchronous endpoints in a thread pool, so every operation
takes the store lock; the check-then-append and find-then-remove steps
must not interleave between requests.

Recipes are copied on the way in and lists are copied on the way out, so
callers never hold references into the store.
"""

import itertools
import logging
import threading
from typing import List, Optional

from .errors import DuplicateRecipeName, ListAlreadyExists, ListNotFound, RecipeNotFound
from .normalize import slugify
from .schemas import CustomList, Recipe

logger = logging.getLogger(__name__)


class ListStore:
    def __init__(self):
        self._lists: List[CustomList] = []
        self._ids = itertools.count(1)
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._lists)

    def list_all(self) -> List[CustomList]:
        with self._lock:
            return [lst.model_copy(deep=True) for lst in self._lists]

    def _get(self, list_id: int) -> CustomList:
        for lst in self._lists:
            if lst.list_id == list_id:
                return lst
        raise ListNotFound("List not found")

    def _find_by_title(self, title: str) -> Optional[CustomList]:
        for lst in self._lists:
            if lst.title == title:
                return lst
        return None

    def find_by_title(self, title: str) -> Optional[CustomList]:
        with self._lock:
            lst = self._find_by_title(title)
            return lst.model_copy(deep=True) if lst is not None else None

    def find_by_id(self, list_id: int) -> CustomList:
        with self._lock:
            return self._get(list_id).model_copy(deep=True)

    def create(self, title: str, recipe: Optional[Recipe] = None) -> CustomList:
        """Create a list, optionally seeded with one recipe.

        Raises ``ListAlreadyExists`` if a list with the same title exists.
        A rejected title does not use up an ID.
        """
        with self._lock:
            if self._find_by_title(title) is not None:
                raise ListAlreadyExists("List already exists")
            lst = CustomList(
                list_id=next(self._ids),
                title=title,
                recipes=[recipe.model_copy(deep=True)] if recipe is not None else [],
            )
            self._lists.append(lst)
            logger.info("Created list %d (%r)", lst.list_id, title)
            return lst.model_copy(deep=True)

    def add_recipe(self, list_id: int, recipe: Recipe) -> CustomList:
        """Append a copy of ``recipe`` to a list and return the updated list.

        Two recipes are duplicates when their names share a slug, the same
        identity ``remove_recipe`` uses.
        """
        with self._lock:
            lst = self._get(list_id)
            slug = slugify(recipe.name)
            if any(slugify(r.name) == slug for r in lst.recipes):
                raise DuplicateRecipeName(
                    "A recipe with the same name already exists in this list"
                )
            lst.recipes.append(recipe.model_copy(deep=True))
            logger.info("Added %r to list %d", recipe.name, list_id)
            return lst.model_copy(deep=True)

    def remove_recipe(self, list_id: int, recipe_slug: str) -> List[CustomList]:
        """Remove the recipe whose name slugifies to ``recipe_slug``.

        Returns every list after the removal.
        """
        with self._lock:
            lst = self._get(list_id)
            for i, r in enumerate(lst.recipes):
                if slugify(r.name) == recipe_slug:
                    del lst.recipes[i]
                    break
            else:
                raise RecipeNotFound("Recipe not found in the list")
            logger.info("Removed %r from list %d", recipe_slug, list_id)
            return self.list_all()
