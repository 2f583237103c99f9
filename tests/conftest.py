import textwrap
from pathlib import Path

import pytest

from folio.schemas.meta import SiteDefaults


def write_post(directory: Path, name: str, header: str, body: str = "Body text.") -> Path:
    """Write a post file with a front matter header and return its path."""
    path = directory / name
    text = f"---\n{textwrap.dedent(header).strip()}\n---\n{textwrap.dedent(body).lstrip()}"
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def posts_dir(tmp_path):
    directory = tmp_path / "posts"
    directory.mkdir()
    return directory


@pytest.fixture
def site_defaults():
    return SiteDefaults(
        title="Site",
        description="Desc",
        image="/default.png",
        base_url="https://example.com",
        site_name="Example",
        twitter_handle="@example",
    )


class FakeRepo:
    """
    Minimal repo stand-in used in service tests.
    """

    def __init__(self, paths):
        self.paths = list(paths)

    def list_post_files(self):
        return list(self.paths)

    def get_post_file(self, slug):
        for path in self.paths:
            if path.stem == slug:
                return path
        return None


class FakePostsService:
    """
    Minimal posts service stand-in for router and builder tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self.requested = []

    def list_posts(self):
        return self._list_posts_return

    def get_post(self, slug: str):
        self.requested.append(slug)
        return self._get_post_return

    def load_all(self):
        return self._list_posts_return
