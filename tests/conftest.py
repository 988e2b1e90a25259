import pytest

from mdblog.errors import Err, NotFoundError, Ok
from mdblog.repos.posts_repo import FilePostsRepo
from mdblog.schemas.blog import PostWriteResult
from mdblog.services.posts_service import PostsService


@pytest.fixture
def posts_dir(tmp_path):
    path = tmp_path / "posts"
    path.mkdir()
    return path


@pytest.fixture
def repo(posts_dir):
    return FilePostsRepo(posts_dir, max_workers=2)


@pytest.fixture
def service(repo):
    return PostsService(repo=repo)


def write_post(posts_dir, slug, title="Title", date="2024-01-01", excerpt="", content=""):
    text = f"---\ntitle: {title}\ndate: {date}\nexcerpt: {excerpt}\n---\n\n{content}"
    (posts_dir / f"{slug}.md").write_text(text, encoding="utf-8")
    return text


class FakeRepo:
    """
    In-memory repo stand-in; set fail_on to a method name to make it raise.
    """

    def __init__(self, files=None, fail_on=None, error=None):
        self.files = dict(files or {})
        self.fail_on = fail_on
        self.error = error or PermissionError("denied")
        self.calls = []

    def _maybe_fail(self, name):
        self.calls.append(name)
        if self.fail_on == name:
            raise self.error

    def exists(self, slug):
        return slug in self.files

    def read(self, slug):
        self._maybe_fail("read")
        return self.files[slug]

    def read_all(self):
        self._maybe_fail("read_all")
        return sorted(self.files.items())

    def create(self, slug, text):
        self._maybe_fail("create")
        if slug in self.files:
            raise FileExistsError(slug)
        self.files[slug] = text

    def write(self, slug, text):
        self._maybe_fail("write")
        self.files[slug] = text

    def delete(self, slug):
        self._maybe_fail("delete")
        del self.files[slug]


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self.calls = []

    def list_posts(self):
        return self._list_posts_return

    def get_post(self, slug: str):
        if self._get_post_return is None:
            return Err(NotFoundError("Post not found"))
        return self._get_post_return

    def create_post(self, data):
        self.calls.append(("create", data))
        return Ok(PostWriteResult(slug=data.slug, message="Post created successfully"))

    def update_post(self, slug, data):
        self.calls.append(("update", slug, data))
        return Ok(PostWriteResult(slug=slug, message="Post updated successfully"))

    def delete_post(self, slug):
        self.calls.append(("delete", slug))
        return Ok(PostWriteResult(message="Post deleted successfully"))
