import logging
from pathlib import Path, PurePosixPath
from typing import List

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = (".md", ".markdown")


class FilesystemPostsRepo:
    def __init__(self, root: Path):
        self.root = Path(root)

    def list_blog_docs(self) -> List[dict]:
        if not self.root.is_dir():
            logger.warning(f"Content directory not found: {self.root}")
            return []

        docs = []
        for path in sorted(self.root.rglob("*")):
            if not path.is_file() or path.suffix.lower() not in MARKDOWN_SUFFIXES:
                continue
            relative = path.relative_to(self.root).as_posix()
            if any(part.startswith((".", "_")) for part in relative.split("/")):
                continue
            docs.append(
                {"_id": relative, "path": str(path), "slug": derive_slug(relative)}
            )
        return docs


def derive_slug(relative_path: str) -> str:
    """
    Map a content-relative file path to its URL slug.

    ``hello-world/index.md`` becomes ``/hello-world/`` and ``notes/foo.md``
    becomes ``/notes/foo/``.
    """
    path = PurePosixPath(relative_path)
    parts = list(path.parent.parts)
    if path.stem != "index":
        parts.append(path.stem)
    if not parts:
        return "/"
    return "/" + "/".join(parts) + "/"


def normalize_slug(slug: str) -> str:
    stripped = slug.strip("/")
    return f"/{stripped}/" if stripped else "/"
