"""Extraction of uploaded profile images from a parsed request.

Files are validated as a batch before any of them is written, then stored
under a generated name in `default_storage`. Only the generated filename is
handed on to the profile code.
"""

import logging
import os
import uuid

from django.conf import settings
from django.core.files.storage import default_storage

from .exceptions import MalformedInput, UploadFailure

logger = logging.getLogger(__name__)


class StoredUpload:
    """An uploaded file that has been written to storage."""

    def __init__(self, filename: str):
        self.filename = filename

    @property
    def relative_path(self) -> str:
        return f"/{settings.MEDIA_URL.strip('/')}/{self.filename}"

    def __repr__(self):
        return f"StoredUpload<{self.filename}>"


# ------------------------------ helpers ------------------------------

def is_uploaded_file(obj) -> bool:
    return hasattr(obj, "read")


def _generated_name(original: str) -> str:
    _, ext = os.path.splitext(original or "")
    return f"{uuid.uuid4().hex}{(ext or '.jpg').lower()}"


def _validate_file(field: str, file_obj):
    ctype = (getattr(file_obj, "content_type", "") or "").lower()
    if ctype not in settings.PROFILE_UPLOAD_CONTENT_TYPES:
        raise UploadFailure(f"Unsupported file type for '{field}'. Only images are allowed.")
    if getattr(file_obj, "size", 0) > settings.PROFILE_UPLOAD_MAX_BYTES:
        raise UploadFailure(f"File too large for '{field}'.")


def form_fields(request) -> dict:
    """Return the non-file fields of a parsed body as a plain dict.

    Multipart bodies may carry a text part and file parts under the same name;
    the last text part wins and file parts are skipped.
    """
    data = request.data
    if hasattr(data, "lists"):
        fields = {}
        for key, values in data.lists():
            texts = [v for v in values if not is_uploaded_file(v)]
            if texts:
                fields[key] = texts[-1]
        return fields
    if not isinstance(data, dict):
        raise MalformedInput(error="Request body must be an object.")
    return {k: v for k, v in data.items() if not is_uploaded_file(v)}


def collect_uploads(request, limits: dict) -> dict:
    """Validate and store the uploaded files of `request`.

    `limits` maps each accepted field name to its maximum file count. Returns
    ``{field: [StoredUpload, ...]}`` with an entry for every accepted field.
    """
    files = request.FILES
    unexpected = sorted(set(files.keys()) - set(limits))
    if unexpected:
        raise UploadFailure(f"Unexpected field: {', '.join(unexpected)}.")

    batch = {}
    for field, max_count in limits.items():
        items = files.getlist(field)
        if len(items) > max_count:
            raise UploadFailure(f"Too many files for '{field}' (max {max_count}).")
        for file_obj in items:
            _validate_file(field, file_obj)
        batch[field] = items

    stored = {}
    for field, items in batch.items():
        stored[field] = []
        for file_obj in items:
            try:
                saved = default_storage.save(_generated_name(file_obj.name), file_obj)
            except OSError as exc:
                logger.exception("Storing upload for '%s' failed.", field)
                raise UploadFailure(str(exc) or None)
            stored[field].append(StoredUpload(os.path.basename(saved)))
    return stored


def discard_uploads(stored: dict):
    """Delete files saved by `collect_uploads` whose profile write failed."""
    for field, items in (stored or {}).items():
        for upload in items:
            try:
                default_storage.delete(upload.filename)
            except OSError:
                logger.warning("Could not remove orphaned upload %s for '%s'.", upload.filename, field)
