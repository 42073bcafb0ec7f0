import datetime
import logging
import math
import posixpath
from typing import Iterator, List, Optional

import frontmatter

from techtrail.repos.posts_repo import normalize_slug
from techtrail.schemas.blog import BlogIndex, PostDetail, PostSummary
from techtrail.services.image_service import (
    find_hero_image,
    process_image_references,
)
from techtrail.services.markdown_renderer import make_excerpt, render_markdown
from techtrail.services.tag_filter import filter_posts
from techtrail.settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)

_EPOCH = datetime.datetime.min.replace(tzinfo=datetime.timezone.utc)


class PostsService:
    def __init__(self, repo, parser, settings: Optional[Settings] = None):
        self.repo = repo
        self.parser = parser
        self.settings = settings if settings is not None else default_settings

    def list_posts(self, tag: Optional[str] = None) -> List[PostSummary]:
        posts = list(self._published_post_data(include_content=False))
        posts.sort(key=_sort_key, reverse=True)
        return filter_posts([PostSummary(**p) for p in posts], tag)

    def get_post(self, slug: str) -> Optional[PostDetail]:
        for post_data in self._published_post_data(
            include_content=True, slug=normalize_slug(slug)
        ):
            return PostDetail(**post_data)
        return None

    def _published_post_data(
        self, include_content: bool, slug: Optional[str] = None
    ) -> Iterator[dict]:
        """
        Parsed posts in repo order, drafts dropped unless enabled. When
        several files share a slug the first one that survives wins, for the
        listing and single-post lookups alike.
        """
        seen_slugs = set()
        for doc in self.repo.list_blog_docs():
            if slug is not None and _doc_slug(doc) != slug:
                continue
            post_data = parse_post_data(
                doc,
                include_content=include_content,
                parser=self.parser,
                excerpt_length=self.settings.EXCERPT_LENGTH,
                date_format=self.settings.DATE_FORMAT,
            )
            if not post_data:
                continue
            if post_data["draft"] and not self.settings.INCLUDE_DRAFTS:
                logger.debug(f"Skipping draft {post_data['slug']}")
                continue
            if post_data["slug"] in seen_slugs:
                logger.warning(
                    f"Duplicate slug {post_data['slug']} from {doc.get('_id')}, skipping"
                )
                continue
            seen_slugs.add(post_data["slug"])
            yield post_data

    def get_index(self) -> BlogIndex:
        return BlogIndex(
            title=self.settings.SITE_TITLE or "Title",
            hero=find_hero_image(
                self.settings.assets_path, self.settings.HERO_IMAGE
            ),
            posts=self.list_posts(),
        )


def parse_post_data(
    doc: dict,
    include_content: bool = False,
    *,
    parser,
    excerpt_length: int = 140,
    date_format: str = "%B %d, %Y",
) -> Optional[dict]:
    """Parse frontmatter and return standardized post data"""
    slug = _doc_slug(doc)
    try:
        markdown_text = parser.get_markdown_content(doc)
        if not markdown_text:
            logger.warning(f"No markdown content found for post {slug}")
            return None

        parsed = frontmatter.loads(markdown_text)
        metadata = parsed.metadata or {}

        post_dir = posixpath.dirname(doc.get("_id", ""))
        body = process_image_references(parsed.content, "/images", post_dir)
        html = render_markdown(body)

        published = _parse_date(metadata.get("date"))

        post_data = {
            "slug": slug,
            "title": _derive_title(metadata),
            "date": _format_date(published, metadata.get("date"), date_format),
            "publishedAt": published.isoformat() if published else None,
            "description": _derive_description(metadata),
            "excerpt": make_excerpt(html, excerpt_length),
            "tags": metadata.get("tags"),
            "readingTime": calculate_reading_time(parsed.content),
            "draft": bool(metadata.get("draft", False)),
        }

        if include_content:
            post_data["html"] = html

        return post_data
    except Exception as e:
        logger.warning(f"Failed to parse post {slug}: {e}")
        return None


def _doc_slug(doc: dict) -> str:
    return doc.get("slug") or normalize_slug(doc.get("_id", ""))


def _sort_key(post_data: dict):
    """Newest first once reversed; undated posts sort last."""
    published = _parse_date(post_data.get("publishedAt"))
    if published is None:
        return (False, _EPOCH)
    if not isinstance(published, datetime.datetime):
        published = datetime.datetime.combine(published, datetime.time())
    if published.tzinfo is None:
        published = published.replace(tzinfo=datetime.timezone.utc)
    return (True, published)


def _derive_title(metadata: dict) -> Optional[str]:
    title = metadata.get("title")
    return str(title) if title else None


def _derive_description(metadata: dict) -> Optional[str]:
    description = metadata.get("description")
    return str(description) if description else None


def _parse_date(value) -> Optional[datetime.date]:
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value
    if isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.datetime.fromisoformat(text)
        except ValueError:
            logger.debug(f"Unrecognized date {value!r}")
    return None


def _format_date(parsed, raw, date_format: str) -> Optional[str]:
    if parsed is not None:
        return parsed.strftime(date_format)
    if raw is None:
        return None
    return str(raw)


def calculate_reading_time(text: str) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / 200) or 1
    return f"{minutes} min"
