import json
import logging
from pathlib import Path
from typing import List

from pydantic import TypeAdapter

from .schemas import Recipe

logger = logging.getLogger(__name__)

DEFAULT_RECIPES_FILE = Path(__file__).resolve().parent / "data" / "recipes.json"

_recipe_list = TypeAdapter(List[Recipe])


def load_recipes(path=DEFAULT_RECIPES_FILE) -> List[Recipe]:
    """Load recipes from a JSON file.

    Args:
        path (str or Path): Path to a JSON file holding an array of recipe
            objects.

    Returns:
        list: validated ``Recipe`` models in file order. A missing file
        yields an empty list.

    Raises:
        pydantic.ValidationError: if an entry does not have the recipe
            shape.
    """
    p = Path(path)
    if not p.exists():
        logger.warning("Recipe file %s not found, starting with an empty catalog", p)
        return []
    with p.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    recipes = _recipe_list.validate_python(raw)
    logger.info("Loaded %d recipe(s) from %s", len(recipes), p)
    return recipes
