import importlib.util
import json
from pathlib import Path

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "check_catalog.py"

loader_spec = importlib.util.spec_from_file_location("check_catalog", SCRIPT)
check_catalog = importlib.util.module_from_spec(loader_spec)
loader_spec.loader.exec_module(check_catalog)


def test_bundled_catalog_is_clean():
    assert check_catalog.check(check_catalog.DEFAULT_RECIPES_FILE) == []


def test_reports_slug_collisions_and_bad_entries(tmp_path):
    base = {"url": "https://example.com/x", "Ingredients": [], "Method": []}
    p = tmp_path / "recipes.json"
    p.write_text(
        json.dumps([
            {**base, "Name": "Chicken Curry"},
            {**base, "Name": "Chicken Curry!"},
            {"Name": "No url", "Ingredients": [], "Method": []},
        ]),
        encoding="utf-8",
    )
    problems = check_catalog.check(p)
    assert len(problems) == 2
    assert problems[0].startswith("#1:") and "chicken-curry" in problems[0]
    assert problems[1].startswith("#2:")
