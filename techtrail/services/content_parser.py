import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class ContentParser:
    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def get_markdown_content(self, doc: dict) -> str:
        """Get the full markdown content of a document (decoded as text)."""
        raw = self._get_raw_content(doc)
        if isinstance(raw, bytes):
            return raw.decode(self.encoding, errors="ignore").lstrip("\ufeff")
        return raw or ""

    def _get_raw_content(self, doc: dict) -> str | bytes | None:
        # Inline content (used by tests and previews)
        for key in ("data", "content"):
            if key in doc:
                return doc[key]

        path = doc.get("path")
        if not path:
            return None
        try:
            return Path(path).read_bytes()
        except FileNotFoundError:
            logger.warning(f"Content file disappeared: {path}")
        except OSError as e:
            logger.error(f"Error reading {path}: {e}")
        return None
