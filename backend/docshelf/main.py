import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from docshelf import __version__
from docshelf.api import api_router
from docshelf.config import get_settings
from docshelf.core.exceptions import ClientException
from docshelf.database import close_db, init_db

settings = get_settings()

# Configure logging - centralized configuration for the entire application
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

# Set third-party loggers to WARNING to reduce noise
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting docshelf API")
    await init_db()
    yield
    # Shutdown
    logger.info("Shutting down docshelf API")
    await close_db()


app = FastAPI(
    title="docshelf",
    description="Document library tag management API",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ClientException)
async def client_exception_handler(request: Request, exc: ClientException) -> JSONResponse:
    """Render client errors as {"type", "message", ...extra}"""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    return {
        "name": "docshelf",
        "description": "Document library tag management",
        "version": __version__,
        "docs": "/docs",
    }
