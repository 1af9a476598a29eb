"""
Developer Tools Backend - FastAPI Application Entry Point
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.logging_config import configure_logging
from core.middleware import global_exception_handler, log_requests
from routers import color, config, diff, git, hashes, tokens
from services.config_manager import ConfigManager

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    config_manager = ConfigManager.get_instance()
    configure_logging(config_manager.get_setting("logging", "level", "INFO"))
    logger.info("Starting Developer Tools Backend (config: %s)", config_manager.config_file)

    yield
    logger.info("Shutting down Developer Tools Backend...")


app = FastAPI(
    title="Developer Tools Backend",
    description="Color, diff, hash, token and repository tools for the portfolio site",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ConfigManager.get_instance().get_setting("cors", "allowOrigins", ["*"]),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(log_requests)
app.add_exception_handler(Exception, global_exception_handler)

# Include routers
app.include_router(color.router, prefix="/api/color", tags=["color"])
app.include_router(diff.router, prefix="/api/diff", tags=["diff"])
app.include_router(hashes.router, prefix="/api/hash", tags=["hash"])
app.include_router(tokens.router, prefix="/api/token", tags=["token"])
app.include_router(git.router, prefix="/api/git", tags=["git"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "devtools-backend"}


if __name__ == "__main__":
    import uvicorn

    server = ConfigManager.get_instance().get("server", {})
    uvicorn.run(app, host=server.get("host", "0.0.0.0"), port=server.get("port", 8000))
