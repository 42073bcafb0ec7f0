import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from techtrail import dependencies as deps
from techtrail.schemas.blog import PostDetail, PostSummary, SiteMetadata
from techtrail.services.posts_service import PostsService
from techtrail.services.tag_filter import build_tag_palette
from techtrail.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[PostSummary])
def list_posts(
    tag: Optional[str] = Query(default=None),
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get all posts metadata, optionally narrowed to one tag."""
    try:
        return service.list_posts(tag=tag)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/tags", response_model=List[str])
def list_tags(service: PostsService = Depends(deps.get_posts_service)):
    try:
        return build_tag_palette(service.list_posts())
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing tags: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/site", response_model=SiteMetadata)
def site_metadata(current_settings: Settings = Depends(deps.get_settings)):
    return current_settings.site_metadata


@router.get("/posts/{slug:path}", response_model=PostDetail)
def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug."""
    try:
        post = service.get_post(slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
