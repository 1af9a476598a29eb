"""Services module - Tool logic, free of HTTP concerns"""

from .color_converter import hex_to_rgb, parse_hex, rgb_to_hex, rgb_to_hsl
from .config_manager import ConfigManager
from .diff_generator import DiffGenerator
from .hash_pipeline import compute_digests
from .patch_renderer import classify_file, render_patch, short_sha, summarize_commit
from .repo_reference import parse_reference
from .token_decoder import decode

__all__ = [
    "hex_to_rgb",
    "parse_hex",
    "rgb_to_hex",
    "rgb_to_hsl",
    "ConfigManager",
    "DiffGenerator",
    "compute_digests",
    "classify_file",
    "render_patch",
    "short_sha",
    "summarize_commit",
    "parse_reference",
    "decode",
]
