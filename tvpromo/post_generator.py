"""
Post Generator
==============

End-to-end pipeline for one video: fetch metadata -> parse title -> render post.

The fetch capability is injected, so the pipeline itself does no I/O;
``write_post`` is the separate step that puts the result on disk.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from .errors import MetadataNotFoundError
from .models import RenderedPost, VideoMetadata
from .post_renderer import render_post
from .shows import Show, get_profile
from .title_parser import parse_title

logger = logging.getLogger(__name__)

MetadataFetcher = Callable[[str], Optional[VideoMetadata]]


def output_file_name(show: Show, episode_number: str) -> str:
    """GCAST + "7" -> "GCAST7.txt"; TECHNOLOGY_AND_FRIENDS + "42" -> "TF42.txt"."""
    return f"{get_profile(show).file_prefix}{episode_number}.txt"


def generate_post(video_id: str, show: Show, fetch_metadata: MetadataFetcher) -> RenderedPost:
    """
    Produce the promotional post for a video.

    Args:
        video_id: YouTube video id
        show: Show the video belongs to
        fetch_metadata: Callable returning VideoMetadata (or None) for a video id

    Returns:
        RenderedPost with text and output file name

    Raises:
        MetadataNotFoundError if no video or no title is found
        TitleFormatError if the title lacks the show's marker word
    """
    meta = fetch_metadata(video_id)
    if meta is None or meta.title is None:
        raise MetadataNotFoundError(video_id)

    parsed = parse_title(meta.title, show)

    text = render_post(
        show,
        video_id=video_id,
        episode_number=parsed.episode_number,
        clean_title=parsed.clean_title,
        description=meta.description,
    )
    return RenderedPost(
        text=text,
        output_file_name=output_file_name(show, parsed.episode_number),
    )


def write_post(post: RenderedPost, output_dir: Path) -> Path:
    """
    Write the post text plus a trailing newline, overwriting any existing file.

    The directory must already exist; OSError propagates to the caller.

    Returns:
        Path of the written file
    """
    fpath = Path(output_dir) / post.output_file_name
    with fpath.open("w", encoding="utf-8") as f:
        f.write(post.text + "\n")
    logger.info("Wrote %s", fpath)
    return fpath
