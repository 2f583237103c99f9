"""Page metadata merging and document head composition.

Everything here is a pure function of its arguments: no I/O, no shared state,
and no input (including an empty override) makes it raise.
"""

import datetime
import logging
from typing import Any, List, Mapping, Optional, Union, get_args

from markupsafe import Markup, escape

from folio.schemas.meta import (
    HeadTag,
    MetaOverride,
    PageMetadata,
    PageType,
    SiteDefaults,
)
from folio.utils import absolute_url

logger = logging.getLogger(__name__)

OverrideLike = Union[MetaOverride, PageMetadata, Mapping[str, Any], None]

PAGE_TYPES = get_args(PageType)

ROBOTS = "follow, index"
TWITTER_CARD = "summary_large_image"


def merge_metadata(override: OverrideLike, defaults: SiteDefaults) -> PageMetadata:
    """Overlay a page's partial metadata onto the site defaults.

    A field from the override wins only when it is present and non-empty;
    otherwise the default is used. Merging an already effective record again
    returns the same record.
    """
    values = _as_dict(override)

    return PageMetadata(
        title=_pick(values.get("title"), defaults.title),
        description=_pick(values.get("description"), defaults.description),
        image=_pick(values.get("image"), defaults.image),
        type=values.get("type") if values.get("type") in PAGE_TYPES else "website",
        date=_coerce_date(values.get("date")),
    )


def compose_head_tags(
    meta: PageMetadata, defaults: SiteDefaults, path: str = ""
) -> List[HeadTag]:
    """Build the head tags for a page from its effective metadata.

    Tags fed by an unset optional field are left out.
    """
    url = absolute_url(defaults.base_url, path or "/")
    image = absolute_url(defaults.base_url, meta.image) if meta.image else None

    tags = [
        HeadTag(name="title", text=meta.title),
        _meta("name", "robots", ROBOTS),
    ]
    if meta.description:
        tags.append(_meta("name", "description", meta.description))
    tags += [
        _meta("property", "og:url", url),
        HeadTag(name="link", attrs=(("rel", "canonical"), ("href", url))),
        _meta("property", "og:type", meta.type),
    ]
    if defaults.site_name:
        tags.append(_meta("property", "og:site_name", defaults.site_name))
    if meta.description:
        tags.append(_meta("property", "og:description", meta.description))
    tags.append(_meta("property", "og:title", meta.title))
    if image:
        tags.append(_meta("property", "og:image", image))

    tags.append(_meta("name", "twitter:card", TWITTER_CARD))
    if defaults.twitter_handle:
        tags.append(_meta("name", "twitter:site", defaults.twitter_handle))
    tags.append(_meta("name", "twitter:title", meta.title))
    if meta.description:
        tags.append(_meta("name", "twitter:description", meta.description))
    if image:
        tags.append(_meta("name", "twitter:image", image))

    if meta.date:
        tags.append(
            _meta("property", "article:published_time", meta.date.isoformat())
        )

    logger.debug(f"Composed {len(tags)} head tags for {url}")
    return tags


def render_head(tags: List[HeadTag]) -> Markup:
    """Serialize head tags to HTML, one per line, in the given order."""
    lines = []
    for tag in tags:
        attrs = "".join(f' {key}="{escape(value)}"' for key, value in tag.attrs)
        if tag.name == "title":
            lines.append(f"<title>{escape(tag.text or '')}</title>")
        else:
            lines.append(f"<{tag.name}{attrs} />")
    return Markup("\n".join(lines))


def _as_dict(override: OverrideLike) -> dict:
    if override is None:
        return {}
    if isinstance(override, (MetaOverride, PageMetadata)):
        return override.model_dump()
    return dict(override)


def _pick(value: Optional[str], default: Optional[str]) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value
    return default


def _coerce_date(value) -> Optional[datetime.date]:
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        try:
            return datetime.date.fromisoformat(value)
        except ValueError:
            logger.warning(f"Ignoring unparsable page date {value!r}")
    return None


def _meta(kind: str, key: str, content: str) -> HeadTag:
    return HeadTag(name="meta", attrs=((kind, key), ("content", content)))
