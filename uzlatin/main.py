"""FastAPI application entry point"""
import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from starlette.exceptions import HTTPException as StarletteHTTPException

from uzlatin.config import settings
from uzlatin.routers import translate

# Configure logging
logging.basicConfig(
    level=logging.INFO if settings.debug else logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info("Starting Uzbek Latin Translation API")
    logger.info(f"CORS origins: {settings.get_cors_origins()}")
    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY is not set; translate requests will fail")
    yield
    logger.info("Shutting down Uzbek Latin Translation API")


# Create FastAPI app
app = FastAPI(
    title="Uzbek Latin Translation API",
    description="LLM translation into Uzbek Latin with script normalization and output validation",
    version="1.0.0",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


@app.exception_handler(StarletteHTTPException)
async def error_body_handler(request: Request, exc: StarletteHTTPException):
    """Render every HTTP error as {"error": ...}; dict details are sent as the body itself"""
    content = exc.detail if isinstance(exc.detail, dict) else {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


# Include routers
app.include_router(translate.router, tags=["translation"])


@app.get("/")
async def root():
    """Health check endpoint"""
    return {
        "status": "ok",
        "service": "Uzbek Latin Translation API",
        "version": "1.0.0"
    }


@app.get("/health")
async def health():
    """Detailed health check"""
    return {
        "status": "healthy",
        "services": {
            "translation": "ready" if settings.openai_api_key else "missing_api_key",
            "auth": "enabled" if settings.client_token else "disabled"
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "uzlatin.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
