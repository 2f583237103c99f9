import pytest

from folio.errors import DuplicateSlugError
from folio.repos.posts_repo import FilePostsRepo
from tests.conftest import write_post


def test_list_post_files_returns_md_and_mdx_sorted(posts_dir):
    write_post(posts_dir, "b-post.md", "title: B")
    write_post(posts_dir, "a-post.mdx", "title: A")
    (posts_dir / "notes.txt").write_text("ignored")
    (posts_dir / "drafts").mkdir()

    repo = FilePostsRepo(posts_dir)

    assert [p.name for p in repo.list_post_files()] == ["a-post.mdx", "b-post.md"]


def test_list_post_files_missing_directory_is_empty(tmp_path):
    repo = FilePostsRepo(tmp_path / "nope")

    assert repo.list_post_files() == []


def test_list_post_files_rejects_duplicate_slugs(posts_dir):
    write_post(posts_dir, "same.md", "title: One")
    write_post(posts_dir, "same.mdx", "title: Two")

    repo = FilePostsRepo(posts_dir)

    with pytest.raises(DuplicateSlugError) as exc:
        repo.list_post_files()
    assert exc.value.slugs == ["same"]


def test_get_post_file_resolves_either_suffix(posts_dir):
    md = write_post(posts_dir, "plain.md", "title: Plain")
    mdx = write_post(posts_dir, "rich.mdx", "title: Rich")

    repo = FilePostsRepo(posts_dir)

    assert repo.get_post_file("plain") == md
    assert repo.get_post_file("rich") == mdx
    assert repo.get_post_file("missing") is None


@pytest.mark.parametrize("slug", ["", "..", "../secret", "a/b", "a\\b"])
def test_get_post_file_refuses_slugs_outside_directory(posts_dir, slug):
    write_post(posts_dir.parent, "secret.md", "title: Secret")

    repo = FilePostsRepo(posts_dir)

    assert repo.get_post_file(slug) is None


def test_slug_for_uses_file_stem(posts_dir):
    path = write_post(posts_dir, "hello-world.mdx", "title: Hello")

    assert FilePostsRepo.slug_for(path) == "hello-world"


def test_get_post_file_rejects_duplicate_slug(posts_dir):
    write_post(posts_dir, "dup.md", "title: One")
    write_post(posts_dir, "dup.mdx", "title: Two")

    repo = FilePostsRepo(posts_dir)

    with pytest.raises(DuplicateSlugError) as exc:
        repo.get_post_file("dup")
    assert exc.value.slugs == ["dup"]
