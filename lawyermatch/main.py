"""
LawyerMatch Backend - Main FastAPI Application
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from lawyermatch.config import settings
from lawyermatch.api.routes import lawyers
from lawyermatch.data.seed_lawyers import SEED_LAWYERS
from lawyermatch.services.lawyer_store import LawyerStore

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# Define lifespan context manager for startup/shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan handler for startup and shutdown events"""
    # Startup
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Debug mode: {settings.DEBUG}")

    if settings.SEED_ON_STARTUP:
        try:
            app.state.lawyer_store.seed(SEED_LAWYERS)
        except Exception:
            logger.exception("Failed to seed lawyer data")
    else:
        logger.info("Skipping lawyer seed (SEED_ON_STARTUP disabled)")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.APP_NAME}")


# Create FastAPI application with lifespan
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="LawyerMatch API - browse, search and filter lawyer profiles",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)
app.state.lawyer_store = LawyerStore()


# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request timing middleware
@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Add processing time to response headers"""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as {"message": ...}"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


# Routes whose validation failures carry their own message
VALIDATION_MESSAGES = {
    "/api/lawyers/filter": "Invalid filter criteria",
}


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Schema violations in path, query or body are client errors"""
    route_path = getattr(request.scope.get("route"), "path", None)
    logger.info(f"Rejected {request.method} {request.url.path}: {len(exc.errors())} validation error(s)")
    return JSONResponse(
        status_code=400,
        content={
            "message": VALIDATION_MESSAGES.get(route_path, "Invalid request parameters"),
            "errors": jsonable_encoder(exc.errors()),
        },
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions"""
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={
            "message": f"Internal server error: {exc}" if settings.DEBUG else "Internal server error",
        },
    )


app.include_router(lawyers.router)


# Health check endpoint
@app.get("/", tags=["Health"])
async def root():
    """Root endpoint - API health check"""
    return {
        "status": "online",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "message": "Welcome to LawyerMatch API",
    }


@app.get("/health", tags=["Health"])
async def health_check(request: Request):
    """Detailed health check endpoint"""
    return {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "debug_mode": settings.DEBUG,
        "lawyers": len(request.app.state.lawyer_store),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "lawyermatch.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG
    )
