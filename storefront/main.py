from typing import Optional
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from storefront.core.config import Settings
from storefront.core.errors import StorefrontError
from storefront.core.logging import configure_logging, get_logger
from storefront.db.seed import seed_items
from storefront.db.session import AppContext, create_db_and_tables
from storefront.routers import auth, items, cart

logger = get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Requests are only served once tables exist and the catalog is seeded
    context: AppContext = app.state.context
    create_db_and_tables(context.engine)
    try:
        with Session(context.engine) as session:
            seed_items(session)
    except SQLAlchemyError:
        logger.exception("Error seeding data")
    logger.info("%s ready", context.settings.PROJECT_NAME)
    yield
    context.engine.dispose()

def _server_error(exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Server error", "error": str(exc)},
    )

def register_exception_handlers(app: FastAPI):
    @app.exception_handler(StorefrontError)
    async def storefront_error_handler(request: Request, exc: StorefrontError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.error)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"message": "Invalid request", "error": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("Database error on %s %s", request.method, request.url.path)
        return _server_error(exc)

    # Runs inside CORSMiddleware so unexpected 500s still carry CORS headers
    @app.middleware("http")
    async def unhandled_error_middleware(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return _server_error(exc)

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        lifespan=lifespan,
        description="API for a small storefront: accounts, catalog and cart",
    )
    app.state.context = AppContext.from_settings(settings)

    @app.get("/")
    def read_root():
        return {"message": f"Welcome to {settings.PROJECT_NAME}. Visit /docs for Swagger UI."}

    app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
    app.include_router(items.router, prefix="/api/items", tags=["items"])
    app.include_router(cart.router, prefix="/api/cart", tags=["cart"])

    register_exception_handlers(app)

    # Added last so it wraps the error middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app
