"""
Pydantic models for recommendations.

``RecommendationCreate`` is the validation layer for new entries: the
name must be a non‑empty string and the link must point at a YouTube
video.  ``RecommendationRead`` is what every endpoint returns.  On the
wire the link is called ``youtubeLink``; in Python and in the database
it is ``youtube_link``.
"""

import re

from pydantic import BaseModel, Field, field_validator

# youtube.com/watch?...v=<id> or youtu.be/<id>
YOUTUBE_LINK_PATTERN = re.compile(
    r"^https?://"
    r"(?:(?:www\.|m\.)?youtube\.com/watch\?(?:[^#\s]*&)?v=[\w-]+"
    r"|youtu\.be/[\w-]+)"
    r"[^\s]*$",
    re.IGNORECASE,
)


def is_youtube_link(value: str) -> bool:
    """Return ``True`` if ``value`` looks like a link to a YouTube video."""
    return bool(YOUTUBE_LINK_PATTERN.match(value))


class RecommendationCreate(BaseModel):
    """Schema for creating a recommendation."""

    name: str = Field(..., examples=["Falamansa - Xote dos Milagres"])
    youtube_link: str = Field(
        ...,
        alias="youtubeLink",
        examples=["https://www.youtube.com/watch?v=chwyjJbcs1Y"],
    )

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name must not be empty")
        return v

    @field_validator("youtube_link")
    @classmethod
    def validate_youtube_link(cls, v: str) -> str:
        if not is_youtube_link(v):
            raise ValueError("Link must be a YouTube video URL")
        return v


class RecommendationRead(BaseModel):
    """Schema for reading a recommendation from the API."""

    id: int
    name: str
    youtube_link: str = Field(..., alias="youtubeLink")
    score: int

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }
