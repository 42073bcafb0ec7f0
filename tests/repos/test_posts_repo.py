import pytest

from techtrail.repos.posts_repo import FilesystemPostsRepo, derive_slug, normalize_slug


@pytest.fixture
def content_dir(tmp_path):
    (tmp_path / "hello-world").mkdir()
    (tmp_path / "hello-world" / "index.md").write_text("hello")
    (tmp_path / "hello-world" / "desk.jpg").write_bytes(b"JPG")
    (tmp_path / "notes").mkdir()
    (tmp_path / "notes" / "foo.markdown").write_text("foo")
    (tmp_path / "_drafts").mkdir()
    (tmp_path / "_drafts" / "wip.md").write_text("wip")
    (tmp_path / ".hidden.md").write_text("hidden")
    return tmp_path


@pytest.mark.parametrize(
    ("relative", "slug"),
    [
        ("hello-world/index.md", "/hello-world/"),
        ("notes/foo.md", "/notes/foo/"),
        ("top.md", "/top/"),
        ("index.md", "/"),
    ],
)
def test_derive_slug(relative, slug):
    assert derive_slug(relative) == slug


def test_normalize_slug():
    assert normalize_slug("hello-world") == "/hello-world/"
    assert normalize_slug("/notes/foo") == "/notes/foo/"
    assert normalize_slug("") == "/"


def test_list_blog_docs_only_returns_visible_markdown(content_dir):
    docs = FilesystemPostsRepo(content_dir).list_blog_docs()

    assert [d["_id"] for d in docs] == ["hello-world/index.md", "notes/foo.markdown"]
    assert [d["slug"] for d in docs] == ["/hello-world/", "/notes/foo/"]
    assert docs[0]["path"] == str(content_dir / "hello-world" / "index.md")


def test_list_blog_docs_missing_directory(tmp_path, caplog):
    with caplog.at_level("WARNING"):
        docs = FilesystemPostsRepo(tmp_path / "nope").list_blog_docs()

    assert docs == []
    assert any("Content directory not found" in r.message for r in caplog.records)
