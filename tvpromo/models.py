"""
Models
======

Pydantic models passed between pipeline stages.
"""

from typing import Optional

from pydantic import BaseModel, field_validator


class VideoMetadata(BaseModel):
    """Title and description of one YouTube video (videos.list snippet)."""
    title: Optional[str] = None
    description: str = ""

    @field_validator("description", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v


class ParsedEpisode(BaseModel):
    """Episode number and clean title extracted from a raw title."""
    episode_number: str  # literal token, e.g. "42" or "12a"
    clean_title: str

    @field_validator("episode_number")
    @classmethod
    def non_empty(cls, v: str):
        if not v:
            raise ValueError("episode_number must not be empty")
        return v


class RenderedPost(BaseModel):
    """Final promotional text and the file name it should be written to."""
    text: str
    output_file_name: str
