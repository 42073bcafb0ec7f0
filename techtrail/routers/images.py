import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from techtrail import dependencies as deps
from techtrail.services.image_service import get_image_from_directory
from techtrail.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _image_response(root: Path, image_path: str) -> Response:
    image_data, content_type = get_image_from_directory(root, image_path)

    if not image_data or not content_type:
        raise HTTPException(status_code=404, detail="Image not found")

    # Set proper content length header
    headers = {
        "Content-Length": str(len(image_data)),
        "Accept-Ranges": "bytes",
    }

    return Response(content=image_data, media_type=content_type, headers=headers)


@router.get("/images/{image_path:path}")
def get_post_image(
    image_path: str, current_settings: Settings = Depends(deps.get_settings)
):
    """
    Serve images stored next to posts in the content directory
    """
    return _image_response(current_settings.content_path, image_path)


@router.get("/assets/{image_path:path}")
def get_asset(image_path: str, current_settings: Settings = Depends(deps.get_settings)):
    """
    Serve site assets such as the hero image
    """
    return _image_response(current_settings.assets_path, image_path)
