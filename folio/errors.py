from typing import Iterable


class FolioError(Exception):
    """Base class for content errors that should fail a site build."""


class InvalidPostError(FolioError):
    def __init__(self, slug: str, reason: str):
        self.slug = slug
        self.reason = reason
        super().__init__(f"Invalid post {slug!r}: {reason}")


class DuplicateSlugError(FolioError):
    def __init__(self, slugs: Iterable[str]):
        self.slugs = sorted(set(slugs))
        super().__init__(f"Duplicate slugs: {self.slugs}")
