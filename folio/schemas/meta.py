import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

PageType = Literal["website", "article"]


class MetaOverride(BaseModel):
    """Partial page metadata supplied by a page. Every field is optional."""

    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    type: Optional[PageType] = None
    date: Optional[datetime.date] = None


class PageMetadata(BaseModel):
    """Effective metadata of a rendered page."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    image: Optional[str] = None
    type: PageType = "website"
    date: Optional[datetime.date] = None


class SiteDefaults(BaseModel):
    """Site-wide fallback values, built once at startup and never mutated."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    image: Optional[str] = None
    base_url: str = ""
    site_name: Optional[str] = None
    twitter_handle: Optional[str] = None


class HeadTag(BaseModel):
    """One element emitted into the document head."""

    model_config = ConfigDict(frozen=True)

    name: Literal["title", "meta", "link"]
    attrs: tuple[tuple[str, str], ...] = ()
    text: Optional[str] = None
