from markupsafe import Markup

from folio.schemas.blog import PostDetail
from folio.schemas.page import Page
from folio.services.posts_service import post_meta_override
from folio.templating import render_template


def post_page(post: PostDetail) -> Page:
    content = render_template("pages/post.html", post=post, body=Markup(post.html))
    return Page(content, post_meta_override(post))
