import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PostFrontMatter(BaseModel):
    """Header of a post file. Title and date are required for a post to be listed."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., min_length=1)
    date: datetime.date
    description: Optional[str] = None
    image: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def _drop_time(cls, value):
        if isinstance(value, datetime.datetime):
            return value.date()
        return value


class PostSummary(BaseModel):
    slug: str
    title: str
    description: Optional[str] = None
    image: Optional[str] = None
    date: datetime.date
    readingTime: Optional[str] = None
    url: str


class PostDetail(PostSummary):
    content: str  # Markdown body without the header
    html: str
