from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class PostSummary(BaseModel):
    slug: str
    title: Optional[str] = None
    date: Optional[str] = None
    publishedAt: Optional[str] = None
    description: Optional[str] = None
    excerpt: str = ""
    tags: List[Optional[str]] = Field(default_factory=list)
    readingTime: Optional[str] = None
    draft: bool = False

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, (list, tuple, set)):
            return [None if item is None else str(item) for item in value]
        return [str(value)]

    @property
    def headline(self) -> str:
        return self.title or self.slug

    @property
    def blurb(self) -> str:
        return self.description or self.excerpt

    @property
    def display_tags(self) -> List[str]:
        return [tag for tag in self.tags if tag]


class PostDetail(PostSummary):
    html: str


class HeroImage(BaseModel):
    src: str
    alt: str = "welcome"


class BlogIndex(BaseModel):
    title: str
    hero: Optional[HeroImage] = None
    posts: List[PostSummary] = Field(default_factory=list)


class TagChip(BaseModel):
    tag: str
    selected: bool = False
    href: Optional[str] = None


class SiteMetadata(BaseModel):
    title: str
    author: str
    summary: Optional[str] = None
    description: Optional[str] = None
    siteUrl: Optional[str] = None
    twitter: Optional[str] = None
