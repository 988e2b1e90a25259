from fastapi import APIRouter, Depends

from mdblog import dependencies as deps
from mdblog.schemas.blog import (
    AuthStatus,
    Post,
    PostCreate,
    PostList,
    PostUpdate,
    PostWriteResult,
)
from mdblog.security import get_auth_status, get_settings, require_admin_token
from mdblog.services.posts_service import PostsService
from mdblog.settings import Settings


router = APIRouter()
admin_only = [Depends(require_admin_token)]


@router.get("/auth-status", response_model=AuthStatus)
def auth_status(current_settings: Settings = Depends(get_settings)):
    return get_auth_status(current_settings)


@router.get("/posts", response_model=PostList)
def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all posts, newest first."""
    return PostList(posts=service.list_posts())


@router.get("/posts/{slug}", response_model=Post)
def get_post(slug: str, service: PostsService = Depends(deps.get_posts_service)):
    """Get a single post by slug."""
    return service.get_post(slug).unwrap()


@router.post(
    "/posts",
    response_model=PostWriteResult,
    status_code=201,
    dependencies=admin_only,
)
def create_post(
    payload: PostCreate,
    service: PostsService = Depends(deps.get_posts_service),
):
    return service.create_post(payload).unwrap()


@router.put("/posts/{slug}", response_model=PostWriteResult, dependencies=admin_only)
def update_post(
    slug: str,
    payload: PostUpdate,
    service: PostsService = Depends(deps.get_posts_service),
):
    return service.update_post(slug, payload).unwrap()


@router.delete(
    "/posts/{slug}",
    response_model=PostWriteResult,
    response_model_exclude_none=True,
    dependencies=admin_only,
)
def delete_post(slug: str, service: PostsService = Depends(deps.get_posts_service)):
    return service.delete_post(slug).unwrap()
