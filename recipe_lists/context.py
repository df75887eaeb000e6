from dataclasses import dataclass, field

from fastapi import Request

from .catalog import RecipeCatalog
from .config import Settings
from .lists import ListStore


@dataclass
class AppContext:
    """State shared by every request of one application instance."""

    catalog: RecipeCatalog
    lists: ListStore = field(default_factory=ListStore)

    @classmethod
    def from_file(cls, recipes_file) -> "AppContext":
        return cls(catalog=RecipeCatalog.from_file(recipes_file))


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
