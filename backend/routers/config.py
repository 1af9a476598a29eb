"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from core.logging_config import configure_logging
from services.config_manager import ConfigManager

router = APIRouter()


class LoggingSettings(BaseModel):
    level: str | None = None


class DiffSettings(BaseModel):
    maxTokens: int | None = Field(default=None, gt=0)


class HashSettings(BaseModel):
    maxUploadBytes: int | None = Field(default=None, gt=0)


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    logging: LoggingSettings | None = None
    diff: DiffSettings | None = None
    hash: HashSettings | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    server: dict
    cors: dict
    logging: dict
    diff: dict
    hash: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()
    return ConfigResponse(
        server=config.get("server", {}),
        cors=config.get("cors", {}),
        logging=config.get("logging", {}),
        diff=config.get("diff", {}),
        hash=config.get("hash", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    # Update only provided fields
    for section in ("logging", "diff", "hash"):
        values = getattr(request, section)
        if values is None:
            continue
        updates = values.model_dump(exclude_none=True)
        current_config[section] = {**current_config.get(section, {}), **updates}

    try:
        config_manager.save_config(current_config)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    if request.logging and request.logging.level:
        configure_logging(request.logging.level)

    return {"status": "success", "message": "Configuration updated"}
