"""
ImageStore: filesystem-backed storage for uploaded images.
Files are written to the primary (build output) directory and mirrored into
the dev-serve directory so both environments resolve /images/<name>.
"""
import logging
import os
import random
import shutil
import time
from typing import Optional, List, Tuple

from werkzeug.datastructures import FileStorage

from highlandgames.config import (
    IMAGE_UPLOAD_DIR, IMAGE_MIRROR_DIR, IMAGE_URL_PREFIX, ALLOWED_IMAGE_EXTENSIONS
)

logger = logging.getLogger(__name__)

_EXTERNAL_PREFIXES = ('http://', 'https://', '//', 'data:')


class ImageStore:

    def __init__(
        self,
        upload_dir: str = IMAGE_UPLOAD_DIR,
        mirror_dir: Optional[str] = IMAGE_MIRROR_DIR,
        allowed_extensions=None
    ):
        self.upload_dir = upload_dir
        self.mirror_dir = mirror_dir or None
        self.allowed_extensions = allowed_extensions or ALLOWED_IMAGE_EXTENSIONS
        self._ensure_dirs()

    def _ensure_dirs(self) -> None:
        """Ensure both image directories exist."""
        for directory in self.directories():
            os.makedirs(directory, exist_ok=True)

    def directories(self) -> List[str]:
        return [d for d in (self.upload_dir, self.mirror_dir) if d]

    def _allowed_file(self, filename: str) -> bool:
        return '.' in filename and \
               filename.rsplit('.', 1)[1].lower() in self.allowed_extensions

    @staticmethod
    def generate_filename(original_name: str) -> str:
        """Timestamp plus random suffix, keeping the original extension."""
        ext = ''
        if original_name and '.' in original_name:
            suffix = original_name.rsplit('.', 1)[1].lower()
            if suffix.isalnum():
                ext = f".{suffix}"
        return f"{int(time.time() * 1000)}-{random.randint(0, 10**9 - 1)}{ext}"

    def save(self, file: Optional[FileStorage]) -> Tuple[Optional[str], Optional[str]]:
        """
        Persist an uploaded file.
        Returns tuple of (reference_path, error).
        """
        if file is None or not file.filename:
            return None, "No file"
        if not self._allowed_file(file.filename):
            return None, f"Invalid file type: {file.filename}"

        filename = self.generate_filename(file.filename)
        primary_path = os.path.join(self.upload_dir, filename)
        file.save(primary_path)
        logger.info("Stored upload %s", primary_path)

        if self.mirror_dir:
            try:
                shutil.copyfile(primary_path, os.path.join(self.mirror_dir, filename))
            except OSError as e:
                # The primary copy is enough to serve the request
                logger.error("Copy to mirror directory failed for %s: %s", filename, e)

        return f"{IMAGE_URL_PREFIX}{filename}", None

    @staticmethod
    def is_managed(reference: Optional[str]) -> bool:
        """True if the reference points at a file this store owns."""
        if not reference or not isinstance(reference, str):
            return False
        if reference.lower().startswith(_EXTERNAL_PREFIXES):
            return False
        return reference.startswith(IMAGE_URL_PREFIX)

    def filename_for(self, reference: str) -> Optional[str]:
        """Bare filename of a managed reference, or None if it points outside the store."""
        if not self.is_managed(reference):
            return None
        filename = reference[len(IMAGE_URL_PREFIX):]
        if not filename or '/' in filename or '\\' in filename or '..' in filename:
            return None
        return filename

    def delete(self, reference: Optional[str]) -> List[str]:
        """
        Remove the referenced file from every directory.
        Missing files and unmanaged references are ignored.
        Returns the paths actually removed.
        """
        filename = self.filename_for(reference)
        if not filename:
            return []

        removed = []
        for directory in self.directories():
            path = os.path.join(directory, filename)
            try:
                os.remove(path)
            except FileNotFoundError:
                continue
            except OSError as e:
                logger.error("Could not delete %s: %s", path, e)
                continue
            logger.info("Deleted: %s", path)
            removed.append(path)
        return removed
