import logging
from typing import List, NamedTuple, Union

from markupsafe import Markup

from folio.schemas.meta import PageMetadata, SiteDefaults
from folio.services.head_composer import (
    OverrideLike,
    compose_head_tags,
    merge_metadata,
    render_head,
)
from folio.templating import jinja_env

logger = logging.getLogger(__name__)

LAYOUT_TEMPLATE = "layout.html"


class NavLink(NamedTuple):
    href: str
    label: str


NAV_LINKS: List[NavLink] = [NavLink("/", "Home"), NavLink("/about", "About")]


def render_layout(
    content: Union[str, Markup],
    override: OverrideLike = None,
    *,
    defaults: SiteDefaults,
    path: str = "/",
) -> str:
    """Wrap page content in the shared chrome and emit its head tags.

    The content is placed in the page as given; it is never escaped or altered.
    A missing override means the site defaults apply unchanged.
    """
    meta: PageMetadata = merge_metadata(override, defaults)
    head = render_head(compose_head_tags(meta, defaults, path))

    logger.debug(f"Rendering layout for {path} with title {meta.title!r}")
    return jinja_env.get_template(LAYOUT_TEMPLATE).render(
        head=head,
        content=Markup(content),
        nav=NAV_LINKS,
        path=path,
        site_name=defaults.site_name or defaults.title,
    )
