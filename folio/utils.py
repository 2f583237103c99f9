import math

WORDS_PER_MINUTE = 200


def calculate_reading_time(text: str) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / WORDS_PER_MINUTE) or 1
    return f"{minutes} min"


def absolute_url(base_url: str, path: str) -> str:
    """Join a site-relative path onto the base URL; absolute URLs pass through."""
    if path.startswith(("http://", "https://", "//")):
        return path
    if not path.startswith("/"):
        path = f"/{path}"
    return f"{base_url.rstrip('/')}{path}"
