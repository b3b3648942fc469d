"""
Title Parser
============

Split a raw YouTube title into episode number and clean title.

Assumed title formats:
- Technology and Friends: "Episode 123: Lorem ipsum on lorem ipsum"
- GCast:                  "GCast 45: Lorem ipsum"

Rules:
- The marker word is matched case-insensitively at a word boundary;
  the word token right after "<marker><whitespace>" is the episode number.
- The clean title is whatever follows the first literal "<number>: "
  (case-sensitive). Without that separator the raw title is kept as-is.
"""

import logging
import re

from .errors import TitleFormatError
from .models import ParsedEpisode
from .shows import Show, get_profile

logger = logging.getLogger(__name__)


def _episode_number_pattern(marker_word: str) -> "re.Pattern[str]":
    return re.compile(rf"\b{re.escape(marker_word)}\s(\w+)", re.IGNORECASE)


def parse_title(raw_title: str, show: Show) -> ParsedEpisode:
    """
    Extract (episode_number, clean_title) from a raw title.

    Args:
        raw_title: Title as returned by the YouTube API
        show: Show whose marker word is expected

    Returns:
        ParsedEpisode

    Raises:
        TitleFormatError if the marker word (followed by a token) is absent
    """
    marker_word = get_profile(show).marker_word

    m = _episode_number_pattern(marker_word).search(raw_title)
    if not m:
        raise TitleFormatError(marker_word, raw_title, show.name)
    episode_number = m.group(1)

    # First "<number>: " occurrence only
    rest = re.search(rf"{re.escape(episode_number)}: (.*)$", raw_title)
    if rest:
        clean_title = rest.group(1)
    else:
        logger.debug("No '%s: ' separator in title %r; keeping raw title", episode_number, raw_title)
        clean_title = raw_title

    logger.info("Parsed %s episode %s: %s", show.name, episode_number, clean_title)
    return ParsedEpisode(episode_number=episode_number, clean_title=clean_title)
