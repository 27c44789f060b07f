UNKNOWN_CATEGORY = "unknown"

# Extension -> content category. Used for filtering, icons and grouping downstream.
CATEGORY_MAP: dict[str, str] = {
    ".html": "markup",
    ".css": "stylesheet",
    ".js": "script",
    ".json": "data",
    ".jpg": "image",
    ".jpeg": "image",
    ".png": "image",
    ".gif": "image",
    ".svg": "image",
    ".ico": "image",
    ".mp3": "audio",
    ".wav": "audio",
    ".mp4": "video",
    ".txt": "document",
    ".md": "document",
    ".bat": "script",
    ".sh": "script",
}


def categorize(ext: str | None) -> str:
    """Return the category label for a lowercased extension such as ``.png``."""
    if not ext:
        return UNKNOWN_CATEGORY
    return CATEGORY_MAP.get(ext, UNKNOWN_CATEGORY)
