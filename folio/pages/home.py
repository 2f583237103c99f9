from typing import List

from folio.schemas.blog import PostSummary
from folio.schemas.page import Page
from folio.templating import render_template

HEADING = "Latest Posts"


def home_page(posts: List[PostSummary]) -> Page:
    """Post listing. Uses the site defaults for its metadata."""
    return Page(render_template("pages/home.html", heading=HEADING, posts=posts))
