import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError

from photobooth.api.v1.auth import router as auth_router
from photobooth.api.v1.booth import router as booth_router
from photobooth.api.v1.events import router as events_router
from photobooth.api.v1.photos import router as photos_router
from photobooth.config.settings import settings
from photobooth.core.limiter import limiter
from photobooth.db.session import init_db
from photobooth.schemas.user import Response

logger = logging.getLogger("photobooth")

tags_metadata = [
    {
        "name": "auth",
        "description": "Wallet identity resolution.",
    },
    {
        "name": "photo-booth",
        "description": "Event selection and photo capture for a booth device.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    if settings.AUTO_CREATE_TABLES:
        init_db()
        logger.info("Database tables ensured")
    logger.info("Blob aggregator: %s", settings.WALRUS_AGGREGATOR_URL)
    yield
    logger.info("Shutting down photo booth service")


app = FastAPI(
    title="Photo Booth API",
    description="Event photo booth backed by Walrus blob storage",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content=Response(message="Database error", status="error", status_code=500).model_dump(),
    )

# CORS policy
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router, prefix="/api/v1/auth", tags=["auth"])
app.include_router(events_router, prefix="/api/v1", tags=["events"])
app.include_router(photos_router, prefix="/api/v1", tags=["photos"])
app.include_router(booth_router, prefix="/api/v1", tags=["photo-booth"])


@app.get("/api/health")
async def health_check():
    return {"status": "ok", "app": "photobooth", "version": "0.1.0"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
