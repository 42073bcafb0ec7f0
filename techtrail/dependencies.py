from fastapi import Depends

from techtrail.repos.posts_repo import FilesystemPostsRepo
from techtrail.services.content_parser import ContentParser
from techtrail.services.posts_service import PostsService
from techtrail.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilesystemPostsRepo(current_settings.content_path)


def get_content_parser():
    return ContentParser()


def get_posts_service(
    repo=Depends(get_posts_repo),
    parser=Depends(get_content_parser),
    current_settings: Settings = Depends(get_settings),
):
    return PostsService(repo=repo, parser=parser, settings=current_settings)
