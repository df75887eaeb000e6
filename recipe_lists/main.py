"""Development entrypoint.

Usage:
- uvicorn recipe_lists.app:app --reload
- python -m recipe_lists.main
"""

import uvicorn

from .config import settings


def main():
    uvicorn.run(
        "recipe_lists.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
