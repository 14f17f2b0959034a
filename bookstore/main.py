from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from contextlib import asynccontextmanager
from typing import Optional
from bookstore.core.config import Settings, settings
from bookstore.core.errors import NotFound, StorageFailure
from bookstore.core.logging import setup_logging
from bookstore.db.session import Database
from bookstore.api import home, book, magazine, aggregate
from bookstore.utils.templates import templates


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    app_settings = app_settings or settings
    logger = setup_logging("bookstore", level=app_settings.LOG_LEVEL, log_dir=app_settings.LOG_DIR)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database.from_settings(app_settings)
        await database.init()
        app.state.database = database
        yield
        logger.info("Application shutdown initiated.")
        await database.dispose()

    app = FastAPI(
        title="Bookstore",
        description="Catalog of books and magazines with per-author summaries",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(home.router, tags=["Home"])
    app.include_router(book.router, prefix="/books", tags=["Books"])
    app.include_router(magazine.router, prefix="/magazines", tags=["Magazines"])
    app.include_router(aggregate.router, prefix="/aggregate", tags=["Aggregate"])

    @app.exception_handler(NotFound)
    async def not_found_handler(request: Request, exc: NotFound):
        logger.info(f"{request.method} {request.url.path}: {exc}")
        return templates.TemplateResponse(
            request, "error.html", {"error": f"{exc.kind} not found"}, status_code=404
        )

    @app.exception_handler(StorageFailure)
    async def storage_failure_handler(request: Request, exc: StorageFailure):
        logger.error(f"{request.method} {request.url.path} failed: {exc}", exc_info=exc)
        return templates.TemplateResponse(
            request, "error.html", {"error": "Unable to fetch data"}, status_code=500
        )

    @app.exception_handler(RequestValidationError)
    async def validation_handler(request: Request, exc: RequestValidationError):
        logger.info(f"{request.method} {request.url.path} rejected: {exc.errors()}")
        return templates.TemplateResponse(
            request, "error.html", {"error": "Invalid form data"}, status_code=422
        )

    return app


app = create_app()
