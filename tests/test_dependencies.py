from pathlib import Path

from folio.dependencies import get_posts_repo, get_posts_service, get_site_defaults
from folio.repos.posts_repo import FilePostsRepo
from folio.services.posts_service import PostsService
from folio.settings import Settings


def test_get_posts_repo_uses_posts_dir():
    repo = get_posts_repo(current_settings=Settings(POSTS_DIR="some/posts"))

    assert isinstance(repo, FilePostsRepo)
    assert repo.posts_dir == Path("some/posts")


def test_get_posts_service_constructs_service():
    class FakeRepo:
        pass

    repo = FakeRepo()
    svc = get_posts_service(repo=repo)

    assert isinstance(svc, PostsService)
    assert svc.repo is repo


def test_get_site_defaults_reads_settings():
    defaults = get_site_defaults(
        current_settings=Settings(SITE_TITLE="T", BASE_URL="https://x.dev/")
    )

    assert defaults.title == "T"
    assert defaults.base_url == "https://x.dev"


def test_get_site_defaults_returns_same_instance_across_calls():
    current = Settings(SITE_TITLE="T")

    first = get_site_defaults(current_settings=current)
    second = get_site_defaults(current_settings=current)

    assert first is second
