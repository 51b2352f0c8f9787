# backend/services/text_utils.py
import re
import time
import unicodedata


def slugify(text: str) -> str:
    text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    text = re.sub(r"[^\w\s-]", "", text.lower())
    text = re.sub(r"[\s_-]+", "-", text)
    return text.strip("-")


def unique_slug(text: str) -> str:
    """Slug with a millisecond suffix, used for listings where titles repeat."""
    base = slugify(text) or "listing"
    return f"{base}-{int(time.time() * 1000)}"
