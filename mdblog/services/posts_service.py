import logging
from typing import List, Optional

from mdblog.errors import (
    ConflictError,
    Err,
    NotFoundError,
    Ok,
    Result,
    StorageIOError,
    ValidationError,
)
from mdblog.schemas.blog import Post, PostCreate, PostUpdate, PostWriteResult
from mdblog.services.content_parser import parse_frontmatter, render_post
from mdblog.utils import MAX_SLUG_LENGTH, date_sort_key, normalize_slug, today_iso

logger = logging.getLogger(__name__)

POST_NOT_FOUND = "Post not found"
SLUG_TOO_LONG = f"Slug must be at most {MAX_SLUG_LENGTH} characters"


class PostsService:
    def __init__(self, repo):
        self.repo = repo

    def list_posts(self) -> List[Post]:
        """All posts, newest first. An unreadable directory yields no posts."""
        try:
            files = self.repo.read_all()
        except OSError as e:
            logger.warning(f"Could not read posts directory: {e}")
            return []

        posts = [parse_post(slug, text) for slug, text in files]
        # files arrive in slug order and sorted() is stable, so equal dates
        # stay alphabetical
        return sorted(posts, key=lambda p: date_sort_key(p.date), reverse=True)

    def get_post(self, slug: str) -> Result[Post]:
        if not self.repo.exists(slug):
            return Err(NotFoundError(POST_NOT_FOUND))
        try:
            text = self.repo.read(slug)
        except FileNotFoundError:
            return Err(NotFoundError(POST_NOT_FOUND))
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read post {slug}: {e}")
            return Err(StorageIOError("Failed to read post"))
        return Ok(parse_post(slug, text))

    def create_post(self, data: PostCreate) -> Result[PostWriteResult]:
        if not data.title or not data.slug:
            return Err(ValidationError("Slug and title are required"))

        slug = normalize_slug(data.slug)
        if not slug:
            return Err(ValidationError("Slug must contain a letter or digit"))
        if len(slug) > MAX_SLUG_LENGTH:
            return Err(ValidationError(SLUG_TOO_LONG))

        text = render_post(
            title=data.title,
            date=data.date or today_iso(),
            excerpt=data.excerpt or "",
            content=data.content or "",
        )
        try:
            self.repo.create(slug, text)
        except FileExistsError:
            return Err(ConflictError("Post with this slug already exists"))
        except OSError as e:
            logger.error(f"Failed to create post {slug}: {e}")
            return Err(StorageIOError("Failed to create post"))

        logger.info(f"Created post {slug}")
        return Ok(PostWriteResult(slug=slug, message="Post created successfully"))

    def update_post(self, slug: str, data: PostUpdate) -> Result[PostWriteResult]:
        if not self.repo.exists(slug):
            return Err(NotFoundError(POST_NOT_FOUND))

        if not data.title or not data.date:
            logger.warning(f"Update of {slug} is missing title or date")

        text = render_post(
            title=data.title or "",
            date=data.date or "",
            excerpt=data.excerpt or "",
            content=data.content or "",
        )
        new_slug = _rename_target(slug, data.slug)
        if new_slug is not None and len(new_slug) > MAX_SLUG_LENGTH:
            return Err(ValidationError(SLUG_TOO_LONG))

        try:
            if new_slug is None:
                self.repo.write(slug, text)
            else:
                self._move(slug, new_slug, text)
        except FileExistsError:
            return Err(ConflictError("Post with this slug already exists"))
        except OSError as e:
            logger.error(f"Failed to update post {slug}: {e}")
            return Err(StorageIOError("Failed to update post"))

        result_slug = new_slug or slug
        logger.info(f"Updated post {slug} -> {result_slug}")
        return Ok(PostWriteResult(slug=result_slug, message="Post updated successfully"))

    def delete_post(self, slug: str) -> Result[PostWriteResult]:
        if not self.repo.exists(slug):
            return Err(NotFoundError(POST_NOT_FOUND))
        try:
            self.repo.delete(slug)
        except FileNotFoundError:
            return Err(NotFoundError(POST_NOT_FOUND))
        except OSError as e:
            logger.error(f"Failed to delete post {slug}: {e}")
            return Err(StorageIOError("Failed to delete post"))

        logger.info(f"Deleted post {slug}")
        return Ok(PostWriteResult(message="Post deleted successfully"))

    def _move(self, old_slug: str, new_slug: str, text: str) -> None:
        # New file first: a failure here leaves the old post untouched
        self.repo.create(new_slug, text)
        self.repo.delete(old_slug)


def parse_post(slug: str, text: str) -> Post:
    """Build a post record from file text, filling in defaults."""
    parsed = parse_frontmatter(text)
    return Post(
        slug=slug,
        title=parsed.get("title") or "Untitled",
        date=parsed.get("date") or today_iso(),
        excerpt=parsed.get("excerpt") or "",
        content=parsed.content,
    )


def _rename_target(current: str, requested: Optional[str]) -> Optional[str]:
    """Normalized new slug, or None when the post keeps its current slug."""
    if not requested:
        return None
    new_slug = normalize_slug(requested)
    if not new_slug or new_slug == current:
        return None
    return new_slug
