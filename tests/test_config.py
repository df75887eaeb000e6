import logging
import sys
from pathlib import Path

# Ensure project root is on sys.path so `recipe_lists` can be imported when tests are run
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))  # noqa: E402

from recipe_lists.config import Settings  # noqa: E402
from recipe_lists.logging_config import LOG_FORMAT, make_handlers  # noqa: E402
from recipe_lists.recipes import DEFAULT_RECIPES_FILE  # noqa: E402


def test_defaults_without_environment():
    s = Settings.from_env({})
    assert s == Settings()
    assert s.api_prefix == "/api"
    assert s.cors_origins == ["*"]
    assert (s.default_page, s.default_limit) == (1, 10)
    assert s.recipes_file == str(DEFAULT_RECIPES_FILE)
    assert s.log_file is None


def test_environment_overrides():
    s = Settings.from_env({
        "API_PREFIX": "/v2",
        "CORS_ORIGINS": "https://a.example, https://b.example,",
        "DEFAULT_LIMIT": "25",
        "LOG_FILE": "/tmp/recipes.log",
        "PORT": "9000",
    })
    assert s.api_prefix == "/v2"
    assert s.cors_origins == ["https://a.example", "https://b.example"]
    assert s.default_limit == 25
    assert s.log_file == "/tmp/recipes.log"
    assert s.port == 9000


def test_console_handler_only_by_default():
    handlers = make_handlers()
    assert len(handlers) == 1
    assert handlers[0].formatter._fmt == LOG_FORMAT


def test_log_file_adds_file_handler(tmp_path):
    log_file = tmp_path / "app.log"
    handlers = make_handlers(str(log_file))
    try:
        file_handlers = [h for h in handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1

        record = logging.LogRecord("recipe_lists", logging.INFO, __file__, 1, "hello", None, None)
        file_handlers[0].emit(record)
        file_handlers[0].flush()
        assert "[INFO] recipe_lists: hello" in log_file.read_text(encoding="utf-8")
    finally:
        for h in handlers:
            h.close()
