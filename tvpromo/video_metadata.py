"""
Video Metadata
==============

Fetch title and description for a single video from YouTube Data API v3.

Features:
- videos.list lookup by id (part=snippet)
- Accepts bare ids as well as watch / youtu.be / embed URLs
- Returns None when the id matches no video
"""

import logging
import re
import urllib.parse as up
from typing import Optional

import requests

from .errors import YouTubeAPIError
from .models import VideoMetadata

logger = logging.getLogger(__name__)

BASE = "https://www.googleapis.com/youtube/v3"

RE_VIDEO_ID = re.compile(r"(?:(?:v=)|(?:youtu\.be/)|(?:/embed/))([0-9A-Za-z_-]{11})")


def normalize_video_id(value: str) -> str:
    """
    Reduce user input to a bare video id.

    - "https://www.youtube.com/watch?v=ZobLLRBbN04&t=3s" -> "ZobLLRBbN04"
    - "https://youtu.be/ZobLLRBbN04" -> "ZobLLRBbN04"
    - "Xw80hwp4TdI&t" -> "Xw80hwp4TdI"
    - anything else is returned stripped
    """
    s = value.strip()
    if s.startswith("http"):
        m = RE_VIDEO_ID.search(s)
        if m:
            return m.group(1)
        q = up.parse_qs(up.urlparse(s).query)
        if q.get("v"):
            return q["v"][0]
        return s
    return s.split("&", 1)[0]


def _get(path: str, api_key: str, **params) -> dict:
    """Make GET request to YouTube API."""
    params["key"] = api_key
    logger.debug("GET %s/%s id=%s", BASE, path, params.get("id"))
    r = requests.get(f"{BASE}/{path}", params=params, timeout=30)
    if r.status_code != 200:
        raise YouTubeAPIError(f"YT API error {r.status_code}: {r.text[:200]}")
    try:
        return r.json()
    except ValueError as e:
        raise YouTubeAPIError(f"YT API returned invalid JSON: {e}") from e


def fetch_video_metadata(video_id: str, api_key: str) -> Optional[VideoMetadata]:
    """
    Look up one video's snippet.

    Args:
        video_id: YouTube video id
        api_key: YouTube Data API key

    Returns:
        VideoMetadata from the first result item, or None if there are no items.
        The title is None when the snippet carries none.

    Raises:
        YouTubeAPIError on non-200 responses or undecodable bodies
    """
    data = _get("videos", api_key, part="snippet", id=video_id)

    items = data.get("items") or []
    if not items:
        logger.info("No video found for ID %s", video_id)
        return None

    sn = items[0].get("snippet") or {}
    return VideoMetadata(title=sn.get("title"), description=sn.get("description"))
