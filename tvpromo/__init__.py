"""
TV Promo Core Modules
=====================

This package turns a YouTube video of GCast or Technology and Friends into a
ready-to-post promotional text: metadata lookup, title parsing and
per-show template rendering.
"""

__version__ = "1.0.0"

from .shows import Show, ShowProfile, SHOW_PROFILES, get_profile
from .models import VideoMetadata, ParsedEpisode, RenderedPost
from .errors import (
    TVPromoError,
    UsageError,
    ConfigurationError,
    YouTubeAPIError,
    MetadataNotFoundError,
    TitleFormatError,
)
from .config import Settings, load_settings
from .title_parser import parse_title
from .post_renderer import render_post
from .video_metadata import fetch_video_metadata, normalize_video_id
from .post_generator import generate_post, output_file_name, write_post

__all__ = [
    "Show",
    "ShowProfile",
    "SHOW_PROFILES",
    "get_profile",
    "VideoMetadata",
    "ParsedEpisode",
    "RenderedPost",
    "TVPromoError",
    "UsageError",
    "ConfigurationError",
    "YouTubeAPIError",
    "MetadataNotFoundError",
    "TitleFormatError",
    "Settings",
    "load_settings",
    "parse_title",
    "render_post",
    "fetch_video_metadata",
    "normalize_video_id",
    "generate_post",
    "output_file_name",
    "write_post",
]
