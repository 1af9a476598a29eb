"""Routers module - FastAPI route handlers"""

from . import color, config, diff, git, hashes, tokens

__all__ = ["color", "config", "diff", "git", "hashes", "tokens"]
