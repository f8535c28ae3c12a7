import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from savings_tracker import config
from savings_tracker.database import Database
from savings_tracker.errors import SavingsTrackerError
from savings_tracker.routes.goal_routes import router as goal_router
from savings_tracker.routes.contribution_routes import router as contribution_router

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)


def _error_body(message: str, details=None) -> dict:
    body = {"error": message}
    if details is not None:
        body["details"] = details
    return body


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(SavingsTrackerError)
    async def savings_error_handler(request: Request, exc: SavingsTrackerError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message, exc.details))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Malformed bodies are client errors like any other validation failure
        return JSONResponse(
            status_code=400,
            content=_error_body("Validation Error", jsonable_errors(exc)),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content=_error_body(exc.detail))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content=_error_body("Internal Server Error"))


def jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]


def create_app(database: Database | None = None) -> FastAPI:
    """Build the API around an explicitly constructed database handle.

    Without one, a handle for DATABASE_URL is created and its tables are
    set up at startup.
    """
    owns_database = database is None
    if owns_database:
        database = Database(config.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if owns_database:
            try:
                database.init_db()
            except Exception as e:
                logger.error(f"Error during database initialization: {e}")
                raise
        yield
        if owns_database:
            database.dispose()

    app = FastAPI(title="Savings Goal Tracker", lifespan=lifespan)
    app.state.database = database

    @app.get("/api/health-check")
    def health():
        return {"status": "ok", "message": "Backend is alive!"}

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials="*" not in config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(goal_router)
    app.include_router(contribution_router)
    return app


def run():
    import uvicorn

    logger.info(f"Starting server on http://{config.HOST}:{config.PORT}")
    uvicorn.run(app, host=config.HOST, port=config.PORT)


app = create_app()

if __name__ == "__main__":
    run()
