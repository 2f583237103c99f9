from typing import NamedTuple

from markupsafe import Markup

from folio.schemas.meta import MetaOverride


class Page(NamedTuple):
    """What a page component hands to the layout."""

    content: Markup
    meta: MetaOverride = MetaOverride()
