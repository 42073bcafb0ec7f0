import textwrap

from techtrail.schemas.blog import BlogIndex
from techtrail.services.tag_filter import filter_posts


class FakeRepo:
    """
    Minimal repo stand-in used in service tests.
    """

    def __init__(self, docs):
        self.docs = docs

    def list_blog_docs(self):
        return list(self.docs)


class FakeParser:
    """
    Minimal markdown/content parser stand-in.
    """

    def __init__(self, content_by_id: dict[str, str]):
        self.content_by_id = content_by_id

    def get_markdown_content(self, doc: dict) -> str | None:
        raw = self.content_by_id.get(doc.get("_id"))
        if raw is None:
            return None
        return textwrap.dedent(raw).lstrip()


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(
        self, list_posts_return=None, get_post_return=None, index_return=None
    ):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self._index_return = index_return
        self.calls = []

    def list_posts(self, tag=None):
        self.calls.append(("list_posts", tag))
        return filter_posts(self._list_posts_return, tag)

    def get_post(self, slug: str):
        self.calls.append(("get_post", slug))
        return self._get_post_return

    def get_index(self):
        self.calls.append(("get_index", None))
        if self._index_return is not None:
            return self._index_return
        return BlogIndex(title="Test Blog", posts=self._list_posts_return)


def make_doc(relative: str, slug: str) -> dict:
    return {"_id": relative, "path": relative, "slug": slug}
