"""Image reference resolution.

Profiles persist image locations as storage-relative paths (``/uploads/x.jpg``)
and hand them to clients as absolute URLs under the public origin. The
resolver translates between both forms; it knows nothing about storage and
the storage layer knows nothing about URLs.
"""

import logging

from django.conf import settings

logger = logging.getLogger(__name__)

TEMPORARY_PREFIX = "blob:"
_ABSOLUTE_SCHEMES = ("http://", "https://")


class ImageReferenceResolver:
    """Bidirectional mapping between relative image paths and absolute URLs."""

    def __init__(self, base_url: str, media_url: str = "/uploads/"):
        self.base_url = (base_url or "").rstrip("/")
        self.media_url = "/" + (media_url or "").strip("/") + "/"

    def to_absolute(self, reference):
        """Return the absolute URL for a stored reference, or None.

        References that are already absolute (legacy rows, placeholder images)
        are returned unchanged.
        """
        if reference is None or not str(reference).strip():
            return None
        reference = str(reference).strip()
        if reference.startswith(_ABSOLUTE_SCHEMES):
            return reference
        return f"{self.base_url}/{reference.lstrip('/')}"

    def to_relative(self, url):
        """Return the storage-relative path for a client URL, or None.

        Temporary client-side references (``blob:``) and URLs outside the
        public origin are rejected as None rather than raising.
        """
        if url is None or not str(url).strip():
            return None
        url = str(url).strip()
        if url.startswith(TEMPORARY_PREFIX):
            return None
        if url.startswith(self.media_url):
            return url
        if self.base_url and url.startswith(self.base_url):
            suffix = url[len(self.base_url):]
            if suffix and not suffix.startswith("/"):
                # e.g. https://host.example.com.evil/...
                return None
            suffix = suffix.lstrip("/")
            return f"/{suffix}" if suffix else None
        return None

    def absolute_gallery(self, references) -> list:
        """Map stored gallery references to absolute URLs, dropping unresolvable ones."""
        return self._resolve_all(references, self.to_absolute)

    def relative_gallery(self, urls) -> list:
        """Map client gallery URLs to storage paths, dropping unresolvable ones."""
        return self._resolve_all(urls, self.to_relative)

    @staticmethod
    def _resolve_all(values, convert) -> list:
        resolved = [convert(v) for v in values or []]
        kept = [v for v in resolved if v]
        dropped = len(resolved) - len(kept)
        if dropped:
            logger.debug("Dropped %d unresolvable gallery reference(s).", dropped)
        return kept


def get_image_resolver() -> ImageReferenceResolver:
    """Build a resolver from the current settings."""
    return ImageReferenceResolver(settings.PUBLIC_BASE_URL, settings.MEDIA_URL)
