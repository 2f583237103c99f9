import logging
from pathlib import Path
from typing import List, Optional

import frontmatter
from pydantic import ValidationError
from yaml import YAMLError

from folio.errors import InvalidPostError
from folio.schemas.blog import PostDetail, PostFrontMatter, PostSummary
from folio.schemas.meta import MetaOverride
from folio.services.markdown_renderer import render_markdown
from folio.utils import calculate_reading_time

logger = logging.getLogger(__name__)

STATIC_PREFIX = "/static/"


class PostsService:
    def __init__(self, repo):
        self.repo = repo

    def list_posts(self) -> List[PostSummary]:
        """All valid posts, newest first. Invalid posts are logged and skipped."""
        posts = []
        for path in self.repo.list_post_files():
            try:
                posts.append(parse_post(path, include_content=False))
            except InvalidPostError as e:
                logger.warning(f"Skipping post: {e}")
        return sort_posts(posts)

    def get_post(self, slug: str) -> Optional[PostDetail]:
        path = self.repo.get_post_file(slug)
        if not path:
            return None
        try:
            return parse_post(path, include_content=True)
        except InvalidPostError as e:
            logger.warning(f"Refusing to render post: {e}")
            return None

    def load_all(self) -> List[PostDetail]:
        """Every post with its rendered body. Any invalid post is an error."""
        posts = [
            parse_post(path, include_content=True)
            for path in self.repo.list_post_files()
        ]
        return sort_posts(posts)


def parse_post(path: Path, include_content: bool = False):
    """Parse a post file into a summary, or a detail when include_content is set."""
    slug = path.stem
    try:
        parsed = frontmatter.load(str(path))
    except (OSError, UnicodeDecodeError, YAMLError) as e:
        raise InvalidPostError(slug, f"unreadable header: {e}") from e

    try:
        header = PostFrontMatter.model_validate(parsed.metadata or {})
    except ValidationError as e:
        problems = ", ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise InvalidPostError(slug, problems) from e

    post_data = {
        "slug": slug,
        "title": header.title,
        "description": header.description,
        "image": normalize_image_path(header.image),
        "date": header.date,
        "readingTime": calculate_reading_time(parsed.content),
        "url": post_url(slug),
    }

    if not include_content:
        return PostSummary(**post_data)

    return PostDetail(
        **post_data,
        content=parsed.content,
        html=str(render_markdown(parsed.content)),
    )


def sort_posts(posts):
    # Newest first; slug keeps same-day posts in a stable order
    ordered = sorted(posts, key=lambda p: p.slug)
    return sorted(ordered, key=lambda p: p.date, reverse=True)


def post_url(slug: str) -> str:
    return f"/posts/{slug}"


def normalize_image_path(image: Optional[str]) -> Optional[str]:
    """Relative hero image paths point into the static directory."""
    if not image or not image.strip():
        return None
    image = image.strip()
    if image.startswith(("http://", "https://", "/")):
        return image
    return f"{STATIC_PREFIX}{image.removeprefix('./')}"


def post_meta_override(post: PostSummary) -> MetaOverride:
    return MetaOverride(
        title=post.title,
        description=post.description,
        image=post.image,
        type="article",
        date=post.date,
    )
