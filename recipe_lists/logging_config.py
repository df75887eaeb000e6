import logging
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# set on handlers installed here so repeated create_app calls add nothing
_MARKER = "_recipe_lists_handler"


def make_handlers(log_file: Optional[str] = None) -> List[logging.Handler]:
    """Console handler, plus a UTF-8 file handler when ``log_file`` is set."""
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _MARKER, True)
    return handlers


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    root = logging.getLogger()
    # unknown level names fall back to INFO
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if any(getattr(h, _MARKER, False) for h in root.handlers):
        return
    for handler in make_handlers(log_file):
        root.addHandler(handler)
