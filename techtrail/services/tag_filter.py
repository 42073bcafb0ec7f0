"""
Tag palette and list filtering for the blog index.

Everything here is a pure function of ``(posts, selected_tag)``. The only
state is the selection owned by a :class:`TagListView`, which the index page
rebuilds on every request from the ``tag`` query parameter.
"""

from functools import cached_property
from typing import Callable, Iterable, List, Optional, Sequence

from techtrail.schemas.blog import PostSummary, TagChip


def _tags_of(post) -> List[Optional[str]]:
    tags = getattr(post, "tags", None)
    if tags is None and isinstance(post, dict):
        tags = post.get("tags")
    if isinstance(tags, str):
        return [tags]
    return list(tags or [])


def build_tag_palette(posts: Iterable) -> List[str]:
    """Distinct non-empty tags across all posts, in order of first appearance."""
    seen = {}
    for post in posts:
        for tag in _tags_of(post):
            if tag and tag not in seen:
                seen[tag] = None
    return list(seen)


def filter_posts(posts: Sequence, selected_tag: Optional[str]) -> List:
    """Posts carrying ``selected_tag``; every post when nothing is selected."""
    if not selected_tag:
        return list(posts)
    return [post for post in posts if selected_tag in _tags_of(post)]


def toggle_tag(current: Optional[str], tag: Optional[str]) -> Optional[str]:
    if current == tag:
        return None
    return tag or None


def render_tag_palette(
    tags: Iterable[Optional[str]],
    selected_tag: Optional[str],
    on_select_tag: Callable[[str], Optional[str]],
) -> List[TagChip]:
    """
    One chip per distinct tag. ``on_select_tag`` receives each tag and its
    return value becomes the chip's ``href``.
    """
    chips = []
    for tag in dict.fromkeys(t for t in tags if t):
        chips.append(
            TagChip(tag=tag, selected=tag == selected_tag, href=on_select_tag(tag))
        )
    return chips


class TagListView:
    def __init__(
        self, posts: Sequence[PostSummary], selected_tag: Optional[str] = None
    ):
        self.posts = list(posts)
        self.selected_tag = selected_tag or None

    def select_tag(self, tag: str) -> Optional[str]:
        self.selected_tag = toggle_tag(self.selected_tag, tag)
        return self.selected_tag

    def next_selection(self, tag: str) -> Optional[str]:
        """Selection that clicking ``tag`` would produce, without applying it."""
        return toggle_tag(self.selected_tag, tag)

    @cached_property
    def palette(self) -> List[str]:
        return build_tag_palette(self.posts)

    @property
    def visible_posts(self) -> List[PostSummary]:
        return filter_posts(self.posts, self.selected_tag)

    @property
    def is_empty(self) -> bool:
        return not self.visible_posts

    def chips(self, link_for: Callable[[Optional[str]], str]) -> List[TagChip]:
        return render_tag_palette(
            self.palette,
            self.selected_tag,
            lambda tag: link_for(self.next_selection(tag)),
        )
