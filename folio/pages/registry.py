from typing import Callable, Dict

from folio.pages.about import about_page
from folio.schemas.page import Page
from folio.settings import Settings

# Pages that need nothing but settings, keyed by route path
STATIC_PAGES: Dict[str, Callable[[Settings], Page]] = {
    "/about": about_page,
}
