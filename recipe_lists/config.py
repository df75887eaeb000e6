import os
from dataclasses import dataclass, field
from typing import List, Optional

from .recipes import DEFAULT_RECIPES_FILE


@dataclass
class Settings:
    """Runtime settings for one application instance.

    Instances built directly use the defaults below; ``Settings.from_env``
    overlays the process environment. ``create_app`` takes either.
    """

    project_name: str = "Recipe Lists API"
    api_version: str = "1.0.0"
    log_level: str = "INFO"
    log_file: Optional[str] = None
    recipes_file: str = str(DEFAULT_RECIPES_FILE)
    api_prefix: str = "/api"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    default_page: int = 1
    default_limit: int = 10
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_env(cls, environ=os.environ) -> "Settings":
        base = cls()
        origins = environ.get("CORS_ORIGINS")
        return cls(
            project_name=environ.get("PROJECT_NAME", base.project_name),
            api_version=environ.get("API_VERSION", base.api_version),
            log_level=environ.get("LOG_LEVEL", base.log_level),
            log_file=environ.get("LOG_FILE") or None,
            recipes_file=environ.get("RECIPES_FILE", base.recipes_file),
            api_prefix=environ.get("API_PREFIX", base.api_prefix),
            cors_origins=(
                [o.strip() for o in origins.split(",") if o.strip()]
                if origins is not None
                else base.cors_origins
            ),
            default_page=int(environ.get("DEFAULT_PAGE", base.default_page)),
            default_limit=int(environ.get("DEFAULT_LIMIT", base.default_limit)),
            host=environ.get("HOST", base.host),
            port=int(environ.get("PORT", base.port)),
        )


settings = Settings.from_env()
