from fastapi import Depends

from mdblog.repos.posts_repo import FilePostsRepo
from mdblog.security import get_settings
from mdblog.services.posts_service import PostsService
from mdblog.settings import Settings


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilePostsRepo(
        current_settings.POSTS_DIR, max_workers=current_settings.LIST_WORKERS
    )


def get_posts_service(repo=Depends(get_posts_repo)):
    return PostsService(repo=repo)
