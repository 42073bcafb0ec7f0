import logging
import posixpath
import re
from pathlib import Path
from typing import Optional, Tuple

from techtrail.schemas.blog import HeroImage

logger = logging.getLogger(__name__)

CONTENT_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".webp": "image/webp",
}
IMAGE_SUFFIXES = tuple(CONTENT_TYPES)


def get_image_from_directory(
    root: Path, image_path: str
) -> Tuple[Optional[bytes], Optional[str]]:
    """
    Read an image below ``root``; paths escaping the root are treated as missing
    """
    try:
        base = Path(root).resolve()
        target = (base / image_path).resolve()
        if base not in target.parents:
            logger.warning(f"Rejected image path outside {base}: {image_path}")
            return None, None
        if not target.is_file():
            logger.warning(f"Image not found: {image_path}")
            return None, None

        image_data = target.read_bytes()
        if not image_data:
            logger.warning(f"No image data found for: {image_path}")
            return None, None

        return image_data, get_content_type_from_filename(target.name)
    except OSError as e:
        logger.error(f"Error retrieving image {image_path}: {e}")
        return None, None


def get_content_type_from_filename(filename: str) -> str:
    """
    Determine content type from file extension
    """
    suffix = Path(filename).suffix.lower()
    return CONTENT_TYPES.get(suffix, "application/octet-stream")


def find_hero_image(
    assets_dir: Path, name: str, base_url: str = "/assets"
) -> Optional[HeroImage]:
    if not name:
        return None
    candidate = Path(assets_dir) / name
    if not candidate.is_file():
        logger.info(f"No hero image at {candidate}")
        return None
    alt = Path(name).stem.replace("-", " ").replace("_", " ")
    return HeroImage(src=f"{base_url}/{name}", alt=alt)


def process_image_references(content: str, base_url: str, post_dir: str = "") -> str:
    """
    Rewrite relative markdown image references so they resolve through the
    images endpoint. Absolute URLs and root-relative paths are left alone.
    """
    relative_pattern = re.compile(
        r"!\[([^\]]*)\]\(\s*(?!https?://|/|data:)([^)\s]+)\s*\)"
    )

    def repl(match: re.Match) -> str:
        alt, target = match.group(1), match.group(2)
        if not target.lower().endswith(IMAGE_SUFFIXES):
            return match.group(0)
        joined = posixpath.normpath(posixpath.join(post_dir, target))
        return f"![{alt}]({base_url}/{joined})"

    return relative_pattern.sub(repl, content)
