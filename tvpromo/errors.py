"""
Errors
======

Exception hierarchy for the promo pipeline. Every failure the operator can
see derives from ``TVPromoError``; file-write problems stay plain ``OSError``.
"""


class TVPromoError(RuntimeError):
    """Base class for all tvpromo errors."""
    pass


class UsageError(TVPromoError):
    """Bad or missing command-line arguments."""
    pass


class ConfigurationError(TVPromoError):
    """A required configuration value is missing."""
    pass


class YouTubeAPIError(TVPromoError):
    """YouTube API error."""
    pass


class MetadataNotFoundError(TVPromoError):
    """The video id yielded no item, or an item without a title."""

    def __init__(self, video_id: str):
        self.video_id = video_id
        super().__init__(f"No video title found for ID {video_id}")


class TitleFormatError(TVPromoError):
    """The show's marker word was not found in the raw title."""

    def __init__(self, marker_word: str, raw_title: str, show: str):
        self.marker_word = marker_word
        self.raw_title = raw_title
        self.show = show
        super().__init__(
            f"Did not find the expected starting word '{marker_word}' "
            f"for title ({raw_title}) of show {show}"
        )
