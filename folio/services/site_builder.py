"""Static export of the whole site to a directory of HTML files."""

import logging
import shutil
from pathlib import Path
from typing import Dict, List

from folio.pages.home import home_page
from folio.pages.post import post_page
from folio.pages.registry import STATIC_PAGES
from folio.schemas.page import Page
from folio.services.layout import render_layout
from folio.services.posts_service import PostsService, post_url
from folio.settings import Settings
from folio.templating import jinja_env
from folio.utils import absolute_url

logger = logging.getLogger(__name__)


def build_site(
    out_dir, service: PostsService, current_settings: Settings
) -> List[Path]:
    """Render every page into out_dir and return the written files.

    Posts are loaded strictly: a post with a malformed header or a duplicate
    slug raises and nothing is written.
    """
    out_dir = Path(out_dir)
    defaults = current_settings.site_defaults

    posts = service.load_all()
    logger.info(f"Loaded {len(posts)} posts")

    pages: Dict[str, Page] = {"/": home_page(posts)}
    for path, page_fn in STATIC_PAGES.items():
        pages[path] = page_fn(current_settings)
    for post in posts:
        pages[post_url(post.slug)] = post_page(post)

    # Posts removed from the content store must not stay published
    shutil.rmtree(out_dir / "posts", ignore_errors=True)
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for path, page in pages.items():
        html = render_layout(page.content, page.meta, defaults=defaults, path=path)
        target = output_path(out_dir, path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(html, encoding="utf-8")
        logger.debug(f"Wrote {target}")
        written.append(target)

    sitemap = out_dir / "sitemap.xml"
    sitemap.write_text(
        jinja_env.get_template("sitemap.xml").render(
            urls=[absolute_url(defaults.base_url, path) for path in pages]
        ),
        encoding="utf-8",
    )
    written.append(sitemap)

    static_dir = Path(current_settings.STATIC_DIR)
    if static_dir.is_dir():
        shutil.copytree(static_dir, out_dir / "static", dirs_exist_ok=True)
    else:
        logger.warning(f"Static directory {static_dir} not found, skipping copy")

    logger.info(f"Built {len(pages)} pages into {out_dir}")
    return written


def output_path(out_dir: Path, path: str) -> Path:
    """Map a route path to its index.html inside the output directory."""
    relative = path.strip("/")
    return out_dir / relative / "index.html" if relative else out_dir / "index.html"
