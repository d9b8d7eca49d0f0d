"""
app/main.py

Purpose: Application entry point

- Initializes FastAPI app
- Loads configuration and logging
- Builds the identity store (in-memory or MongoDB) for the process
- Registers API routes (auth, catalogue, diagnostics)
- No business logic should be written here
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from datetime import datetime, timezone
import time

from app.core.config import settings, validate_settings
from app.core.errors import add_exception_handlers
from app.core.logging import setup_logging, get_logger
from app.db.mongo import connect_to_mongo, close_mongo_connection, check_database_health, get_users_collection
from app.db.indexes import create_indexes
from app.db.user_backends import InMemoryUserBackend, MongoUserBackend, UserBackend
from app.services.identity_store import IdentityStore
from app.services.notification_service import notification_service
from app.api import auth, catalog
from utils.constants import APP_NAME, APP_VERSION, ENDPOINTS

# Initialize logging first
setup_logging()
logger = get_logger(__name__)


async def build_user_backend() -> UserBackend:
    """
    Picks the persistence backend from STORE_BACKEND.
    """
    if settings.STORE_BACKEND == "mongo":
        logger.info("Connecting to MongoDB...")
        await connect_to_mongo()
        await create_indexes()
        return MongoUserBackend(get_users_collection())

    logger.info("Using in-memory user store (demo mode, users are lost on restart)")
    return InMemoryUserBackend()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    logger.info("Starting Medicover API...")

    try:
        validate_settings()
        backend = await build_user_backend()
        app.state.identity_store = IdentityStore(
            backend,
            min_password_length=settings.MIN_PASSWORD_LENGTH,
        )
        logger.info(f"Environment: {settings.ENVIRONMENT}")
        logger.info(f"Store backend: {backend.name}")
        logger.info(f"Email: {'configured' if notification_service.is_configured() else 'simulated'}")

    except Exception as e:
        logger.critical(f"Failed to start application: {str(e)}", exc_info=True)
        raise

    yield  # Application runs here

    logger.info("Shutting down Medicover API...")
    await close_mongo_connection()


app = FastAPI(
    title=APP_NAME,
    description="Healthcare demo backend: accounts, profiles and demo catalogue",
    version=APP_VERSION,
    lifespan=lifespan,
    debug=settings.DEBUG,
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
    max_age=86400,
)

add_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Logs every request with its status and processing time."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)

    context = {
        "method": request.method,
        "path": request.url.path,
        "status_code": response.status_code,
        "process_time": process_time,
    }
    if process_time > 5.0:
        logger.warning(f"Slow request detected: {request.method} {request.url.path}", extra=context)
    else:
        logger.info(f"{request.method} {request.url.path} {response.status_code}", extra=context)

    return response


app.include_router(auth.router, prefix=f"{settings.API_PREFIX}/auth", tags=["Auth"])
app.include_router(catalog.router, prefix=settings.API_PREFIX, tags=["Catalogue"])


async def database_status() -> str:
    if settings.STORE_BACKEND != "mongo":
        return "Not connected (Demo Mode)"
    return "Connected" if await check_database_health() else "Unavailable"


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint - service banner."""
    return {
        "message": APP_NAME,
        "version": APP_VERSION,
        "status": "Running",
        "environment": settings.ENVIRONMENT,
        "services": {
            "database": await database_status(),
            "email": "Configured" if notification_service.is_configured() else "Simulated",
            "api": "Running",
        },
        "endpoints": ENDPOINTS,
    }


@app.get(f"{settings.API_PREFIX}/health", tags=["Health"])
async def health_check():
    """Service status for the frontend and load balancers."""
    return {
        "status": "OK",
        "message": f"{APP_NAME} is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.ENVIRONMENT,
        "services": {
            "database": await database_status(),
            "email": "Configured" if notification_service.is_configured() else "Not configured (Simulated)",
        },
    }


@app.get(f"{settings.API_PREFIX}/test", tags=["Health"])
async def connectivity_test(request: Request):
    """Reachability check from other devices on the network."""
    return {
        "message": "Backend Working Perfectly!",
        "client_ip": request.client.host if request.client else None,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower()
    )
