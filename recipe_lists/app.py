import logging
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, settings as default_settings
from .context import AppContext, get_context
from .errors import RecipeListsError
from .logging_config import setup_logging
from .routers import lists, recipes

logger = logging.getLogger(__name__)


async def handle_domain_error(request: Request, exc: RecipeListsError):
    logger.warning(
        "%s %s -> %d %s: %s",
        request.method, request.url.path, exc.status_code, exc.kind, exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def handle_http_error(request: Request, exc: StarletteHTTPException):
    # routing failures such as unknown paths (404) or wrong methods (405)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    # Raised by FastAPI itself, e.g. for a body that is not valid JSON
    messages = [err.get("msg", "Invalid request") for err in exc.errors()]
    logger.warning("%s %s -> 400: %s", request.method, request.url.path, messages)
    return JSONResponse(
        status_code=400, content={"error": "; ".join(messages) or "Invalid request"}
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(
    context: Optional[AppContext] = None,
    settings: Settings = default_settings,
) -> FastAPI:
    """Build the FastAPI application.

    When no ``context`` is given the catalog is loaded from
    ``settings.recipes_file`` and an empty list store is created.
    """
    setup_logging(settings.log_level, settings.log_file)

    if context is None:
        context = AppContext.from_file(settings.recipes_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.context = context
    app.state.settings = settings

    # Allow CORS for API clients (narrow CORS_ORIGINS for production)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RecipeListsError, handle_domain_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    app.include_router(recipes.router, prefix=f"{settings.api_prefix}/recipes", tags=["recipes"])
    app.include_router(lists.router, prefix=f"{settings.api_prefix}/lists", tags=["lists"])

    @app.get("/health")
    def health(ctx: AppContext = Depends(get_context)):
        return {"status": "ok", "recipes": len(ctx.catalog)}

    logger.info(
        "App ready with %d recipe(s) under %s", len(context.catalog), settings.api_prefix
    )
    return app


app = create_app()
