import datetime
import logging
import urllib.parse
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from techtrail import dependencies as deps
from techtrail.schemas.blog import BlogIndex, SiteMetadata
from techtrail.services.posts_service import PostsService
from techtrail.services.tag_filter import TagListView
from techtrail.settings import Settings
from techtrail.templating import render_template

logger = logging.getLogger(__name__)

router = APIRouter()


def index_href(selected_tag: Optional[str]) -> str:
    """URL of the index page with ``selected_tag`` applied."""
    if not selected_tag:
        return "/"
    return "/?" + urllib.parse.urlencode({"tag": selected_tag})


@router.get("/")
def blog_index(
    tag: Optional[str] = Query(default=None),
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    """Post listing with the tag palette."""
    try:
        index = service.get_index()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error building index: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")

    return render_template(
        "index.html", build_index_context(index, tag, current_settings.site_metadata)
    )


def build_index_context(
    index: BlogIndex, tag: Optional[str], site: SiteMetadata
) -> dict:
    view = TagListView(index.posts, tag)
    if view.is_empty:
        logger.info(f"No posts to show for tag {view.selected_tag!r}")

    return {
        "site": site,
        "page_title": f"Posts | {index.title}",
        "hero": index.hero,
        "view": view,
        "chips": view.chips(index_href),
        "clear_href": index_href(None),
        "year": datetime.date.today().year,
    }
