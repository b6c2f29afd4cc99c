"""
Shipping Application Factory
============================

Pusat perakitan aplikasi FastAPI menggunakan Application Factory Pattern.
"""

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging
import time
import uuid

from .config import settings
from .logging_config import configure_logging
from .services.exceptions import ValidationError, NotFoundError, ConflictError, ShippingServiceError
from .schemas.validators import error_field, error_rule
from .responses import APIResponse
from .routes import shipping_method_router, shipping_zone_router, shipping_fee_router
from .database import async_engine, init_models

logger = logging.getLogger(__name__)

def _error_response(status_code: int, message: str, errors=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(APIResponse.error(message=message, errors=errors))
    )

def setup_middleware(app: FastAPI):
    """Setup semua middleware aplikasi."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )
    app.add_middleware(
        TrustedHostMiddleware,
        allowed_hosts=settings.ALLOWED_HOSTS
    )

    @app.middleware("http")
    async def add_request_id_and_process_time(request: Request, call_next):
        request_id = str(uuid.uuid4())
        start_time = time.time()

        request.state.request_id = request_id
        try:
            response = await call_next(request)
        except Exception:
            # Error tak terduga dari route: dijawab di sini supaya header request id tetap ada
            logger.exception(f"Unexpected error on {request.method} {request.url.path} (request_id={request_id})")
            response = _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        response.headers["X-Request-ID"] = request_id
        return response

def setup_exception_handlers(app: FastAPI):
    """Setup semua custom exception handlers."""

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(request: Request, exc: ValidationError):
        return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, exc.message, exc.errors)

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
        # Body/path yang tidak bisa di-parse sama sekali (JSON rusak, id bukan angka)
        errors = {}
        for error in exc.errors():
            loc = [part for part in error['loc'] if part not in ('body', 'path', 'query')]
            field = 'body' if error['type'] == 'json_invalid' else error_field(loc)
            if error_rule(error['type']) == 'required' and field == 'body':
                message = 'The request body is required.'
            else:
                message = error['msg']
            errors.setdefault(field, []).append(message)
        return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, "Invalid input data", errors)

    @app.exception_handler(NotFoundError)
    async def not_found_exception_handler(request: Request, exc: NotFoundError):
        return _error_response(status.HTTP_404_NOT_FOUND, exc.message)

    @app.exception_handler(ConflictError)
    async def conflict_exception_handler(request: Request, exc: ConflictError):
        return _error_response(status.HTTP_409_CONFLICT, exc.message)

    @app.exception_handler(ShippingServiceError)
    async def service_exception_handler(request: Request, exc: ShippingServiceError):
        logger.error(f"Unhandled service error [{exc.error_code}]: {exc.message}")
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        request_id = getattr(request.state, 'request_id', None)
        logger.exception(f"Unexpected error on {request.method} {request.url.path} (request_id={request_id})")
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

def setup_routes(app: FastAPI):
    """Daftarkan (include) semua router ke aplikasi."""
    # Endpoint sistem
    @app.get("/health", tags=["System"])
    async def health_check():
        return {"status": "healthy", "timestamp": time.time()}

    @app.get("/", tags=["System"])
    async def root():
        return {"message": "Shipping API", "version": "1.0.0", "docs": "/docs"}

    prefix = settings.API_PREFIX.rstrip("/")
    app.include_router(shipping_method_router, prefix=f"{prefix}/shipping/method", tags=["Shipping Methods"])
    app.include_router(shipping_zone_router, prefix=f"{prefix}/shipping/zone", tags=["Shipping Zones"])
    app.include_router(shipping_fee_router, prefix=f"{prefix}/shipping", tags=["Shipping Fee"])

def create_app() -> FastAPI:
    """
    Application Factory: Membuat dan mengkonfigurasi instance FastAPI.
    """
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Shipping API starting up, creating tables if needed")
        await init_models()
        yield
        logger.info("Shipping API shutting down")
        await async_engine.dispose()

    app = FastAPI(
        title="Shipping Fee API",
        description="Shipping methods, shipping zones, and shipping fee calculation",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    setup_middleware(app)
    setup_exception_handlers(app)
    setup_routes(app)

    logger.info("FastAPI app created and configured successfully.")
    return app
