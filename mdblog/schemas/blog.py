from typing import List, Optional

from pydantic import BaseModel


class Post(BaseModel):
    slug: str
    title: str
    date: str
    excerpt: str = ""
    content: str = ""


class PostList(BaseModel):
    posts: List[Post]


class PostCreate(BaseModel):
    # Optional so that missing fields reach the store's own validation
    title: Optional[str] = None
    slug: Optional[str] = None
    date: Optional[str] = None
    excerpt: Optional[str] = None
    content: Optional[str] = None


class PostUpdate(BaseModel):
    title: Optional[str] = None
    slug: Optional[str] = None
    date: Optional[str] = None
    excerpt: Optional[str] = None
    content: Optional[str] = None


class PostWriteResult(BaseModel):
    success: bool = True
    slug: Optional[str] = None
    message: str


class AuthStatus(BaseModel):
    mode: str
    requiresAuth: bool
    hasToken: bool
