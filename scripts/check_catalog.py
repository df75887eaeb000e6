"""Check a recipe JSON file before shipping it as the catalog.

Reports entries that do not validate and recipes whose names share a
slug (only the first of those can be reached by slug lookup).

Usage:
    python scripts/check_catalog.py [path/to/recipes.json]
"""
import json
import sys
from pathlib import Path

import pydantic

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))  # noqa: E402

from recipe_lists.normalize import slugify  # noqa: E402
from recipe_lists.recipes import DEFAULT_RECIPES_FILE  # noqa: E402
from recipe_lists.schemas import Recipe  # noqa: E402


def check(path):
    problems = []
    data = json.loads(Path(path).read_text(encoding='utf-8'))
    if not isinstance(data, list):
        return ['top-level value must be an array of recipes']
    seen = {}
    for i, entry in enumerate(data):
        try:
            recipe = Recipe.model_validate(entry)
        except pydantic.ValidationError as e:
            problems.append(f'#{i}: {e.error_count()} validation error(s): {e.errors()[0]["msg"]}')
            continue
        slug = slugify(recipe.name)
        if slug in seen:
            problems.append(f'#{i}: {recipe.name!r} has the same slug as #{seen[slug]} ({slug})')
        else:
            seen[slug] = i
    return problems


def main():
    path = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_RECIPES_FILE
    problems = check(path)
    for p in problems:
        print(p)
    print(f'{len(problems)} problem(s) in {path}')
    return 1 if problems else 0


if __name__ == '__main__':
    sys.exit(main())
