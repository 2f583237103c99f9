from folio.schemas.meta import MetaOverride
from folio.schemas.page import Page
from folio.settings import Settings
from folio.templating import render_template


def about_page(settings: Settings) -> Page:
    content = render_template(
        "pages/about.html",
        author=settings.AUTHOR_NAME,
        twitter_url=settings.TWITTER_URL,
    )
    return Page(content, MetaOverride(title=f"About - {settings.AUTHOR_NAME}"))
