import sys
from pathlib import Path

# Ensure project root is on sys.path so `recipe_lists` can be imported when tests are run
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))  # noqa: E402

import pytest  # noqa: E402

from recipe_lists.normalize import slugify  # noqa: E402


@pytest.mark.parametrize(
    "name,expected",
    (
        ("Chicken Curry!", "chicken-curry"),
        ("Mrs. Brown's Apple Pie", "mrs-browns-apple-pie"),
        ("Fish (and) Chips", "fish-and-chips"),
        ("Leek & Potato Soup", "leek-and-potato-soup"),
        ("Crème Brûlée", "creme-brulee"),
        ("  Spaced   Out  Name ", "spaced-out-name"),
        ("Sweet-and-Sour Pork", "sweet-and-sour-pork"),
        ('Say "Cheese": @home *now* +1 ~ok', "say-cheese-home-now-1-ok"),
        ("", ""),
    ),
)
def test_slugify(name, expected):
    assert slugify(name) == expected


@pytest.mark.parametrize(
    "name",
    ["Chicken Curry!", "Leek & Potato Soup", "a - b -- c", "Crème Brûlée", "Salt, pepper"],
)
def test_slugify_is_idempotent(name):
    once = slugify(name)
    assert slugify(once) == once


def test_slugify_only_punctuation_is_empty():
    assert slugify("!!! ...") == ""
