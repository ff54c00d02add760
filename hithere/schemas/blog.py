from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PostEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    description: str = ""
    tags: List[str] = Field(default_factory=list)
    isPublished: bool = False


class Category(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    posts: List[PostEntry] = Field(default_factory=list)


class FrontMatter(BaseModel):
    title: Optional[str] = None
    date: Optional[str] = None
    authors: Optional[List[str]] = None
    relates: Optional[List[str]] = None


class RelatedPost(BaseModel):
    title: str
    slug: str


class PostIdentifier(BaseModel):
    category: str
    slug: str


class PostMetadata(BaseModel):
    title: str
    keywords: str
    description: str


class Metadata(BaseModel):
    title: str
    description: str
    slug: str
    tag: str
    authors: List[str] = Field(default_factory=list)
    date: Optional[str] = None


class PostData(BaseModel):
    category: str
    slug: str
    title: str
    date: Optional[str] = None
    authors: List[str] = Field(default_factory=list)
    contentHtml: str
    relates: List[RelatedPost] = Field(default_factory=list)
    readingTime: Optional[str] = None
    editUrl: Optional[str] = None
