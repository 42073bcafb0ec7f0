import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from techtrail.repos.posts_repo import FilesystemPostsRepo
from techtrail.routers import images, pages, posts
from techtrail.security import get_api_key
from techtrail.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    repo = FilesystemPostsRepo(settings.content_path)
    docs = repo.list_blog_docs()
    logger.info(
        f"Serving {len(docs)} markdown files from {settings.content_path.resolve()}"
    )
    yield
    logger.info("Techtrail shut down")


app = FastAPI(
    title="Techtrail",
    description=settings.SITE_DESCRIPTION,
    lifespan=lifespan,
)

app.include_router(pages.router)
app.include_router(images.router)
app.include_router(
    posts.router, prefix="/api", dependencies=[Depends(get_api_key)]
)


@app.get("/health")
async def health():
    return {"message": "Techtrail is running"}
