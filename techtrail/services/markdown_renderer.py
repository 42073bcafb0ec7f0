import html
import re

import markdown

MARKDOWN_EXTENSIONS = ["extra", "sane_lists", "smarty", "toc"]
TAG_RE = re.compile(r"<[^>]+>")
WHITESPACE_RE = re.compile(r"\s+")
ELLIPSIS = "…"


def render_markdown(text: str) -> str:
    return markdown.markdown(text or "", extensions=MARKDOWN_EXTENSIONS)


def strip_tags(html_text: str) -> str:
    return html.unescape(TAG_RE.sub(" ", html_text))


def make_excerpt(html_text: str, length: int = 140) -> str:
    """Plain-text excerpt of rendered HTML, pruned at a word boundary."""
    text = WHITESPACE_RE.sub(" ", strip_tags(html_text)).strip()
    if len(text) <= length:
        return text
    cut = text[:length]
    if " " in cut and not text[length].isspace():
        cut = cut.rsplit(" ", 1)[0]
    return cut.rstrip(" ,.;:") + ELLIPSIS
