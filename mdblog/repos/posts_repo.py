import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

POST_SUFFIX = ".md"


class FilePostsRepo:
    """One ``<slug>.md`` file per post in a single directory.

    Methods raise ``OSError`` on filesystem failures; deciding what a failure
    means is left to the service.
    """

    def __init__(self, posts_dir: Path, max_workers: int = 8):
        self.posts_dir = Path(posts_dir)
        self.max_workers = max_workers

    def path_for(self, slug: str) -> Path:
        return self.posts_dir / f"{slug}{POST_SUFFIX}"

    def exists(self, slug: str) -> bool:
        try:
            return self.path_for(slug).is_file()
        except OSError:
            # e.g. ENAMETOOLONG: no such post can exist
            return False

    def list_slugs(self) -> List[str]:
        names = sorted(
            entry.name
            for entry in self.posts_dir.iterdir()
            if entry.name.endswith(POST_SUFFIX) and entry.is_file()
        )
        return [name.removesuffix(POST_SUFFIX) for name in names]

    def read(self, slug: str) -> str:
        return self.path_for(slug).read_text(encoding="utf-8")

    def read_all(self) -> List[Tuple[str, str]]:
        """Read every post file, in slug order.

        Raises ``OSError`` if the directory itself cannot be listed. Files
        that fail to read are logged and left out.
        """
        slugs = self.list_slugs()
        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            texts = list(pool.map(self._read_or_none, slugs))
        return [(slug, text) for slug, text in zip(slugs, texts) if text is not None]

    def create(self, slug: str, text: str) -> None:
        """Write a new post file; raises ``FileExistsError`` if the slug is taken."""
        self.posts_dir.mkdir(parents=True, exist_ok=True)
        with self.path_for(slug).open("x", encoding="utf-8") as fh:
            fh.write(text)

    def write(self, slug: str, text: str) -> None:
        self.path_for(slug).write_text(text, encoding="utf-8")

    def delete(self, slug: str) -> None:
        self.path_for(slug).unlink()

    def _read_or_none(self, slug: str) -> Optional[str]:
        try:
            return self.read(slug)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Skipping unreadable post {slug}: {e}")
            return None
