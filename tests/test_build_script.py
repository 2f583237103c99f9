from scripts import build as build_script
from folio.settings import Settings
from tests.conftest import write_post


def make_settings(tmp_path, posts_dir):
    return Settings(
        POSTS_DIR=str(posts_dir),
        STATIC_DIR=str(tmp_path / "no-static"),
        BUILD_DIR=str(tmp_path / "default-out"),
    )


def test_main_builds_into_out_dir(monkeypatch, tmp_path, posts_dir):
    write_post(posts_dir, "hello.md", "title: Hello\ndate: 2022-08-02")
    monkeypatch.setattr(build_script, "settings", make_settings(tmp_path, posts_dir))
    out = tmp_path / "site"

    assert build_script.main(["--out", str(out)]) == 0
    assert (out / "posts" / "hello" / "index.html").exists()


def test_main_defaults_to_build_dir(monkeypatch, tmp_path, posts_dir):
    monkeypatch.setattr(build_script, "settings", make_settings(tmp_path, posts_dir))

    assert build_script.main([]) == 0
    assert (tmp_path / "default-out" / "index.html").exists()


def test_main_exits_non_zero_on_invalid_post(monkeypatch, tmp_path, posts_dir, caplog):
    write_post(posts_dir, "broken.md", "description: nothing else")
    monkeypatch.setattr(build_script, "settings", make_settings(tmp_path, posts_dir))

    assert build_script.main(["--out", str(tmp_path / "site")]) == 1
    assert "Build failed" in caplog.text
