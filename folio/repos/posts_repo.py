import logging
from collections import Counter
from pathlib import Path
from typing import List, Optional

from folio.errors import DuplicateSlugError

logger = logging.getLogger(__name__)

POST_SUFFIXES = (".mdx", ".md")


class FilePostsRepo:
    def __init__(self, posts_dir):
        self.posts_dir = Path(posts_dir)

    def list_post_files(self) -> List[Path]:
        if not self.posts_dir.is_dir():
            logger.warning(f"Posts directory {self.posts_dir} does not exist")
            return []
        files = sorted(
            path
            for path in self.posts_dir.iterdir()
            if path.is_file() and path.suffix in POST_SUFFIXES
        )
        self._check_unique(files)
        return files

    def get_post_file(self, slug: str) -> Optional[Path]:
        if not self._is_valid_slug(slug):
            return None
        candidates = (self.posts_dir / f"{slug}{suffix}" for suffix in POST_SUFFIXES)
        matches = [path for path in candidates if path.is_file()]
        self._check_unique(matches)
        return matches[0] if matches else None

    @staticmethod
    def slug_for(path: Path) -> str:
        return path.stem

    @staticmethod
    def _check_unique(files: List[Path]) -> None:
        counts = Counter(path.stem for path in files)
        duplicates = [slug for slug, count in counts.items() if count > 1]
        if duplicates:
            raise DuplicateSlugError(duplicates)

    @staticmethod
    def _is_valid_slug(slug: str) -> bool:
        return bool(slug) and "/" not in slug and "\\" not in slug and slug not in (
            ".",
            "..",
        )
