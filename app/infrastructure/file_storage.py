"""Profile picture storage on the local filesystem under UPLOAD_DIR."""

import os
import uuid
from typing import Optional

import structlog

from app.config import get_settings

logger = structlog.get_logger(__name__)

ALLOWED_PICTURE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif")
PICTURE_SUBDIR = "profile-pictures"
PUBLIC_PREFIX = "/uploads"


class ProfilePictureStorage:
    """Stores pictures as <user_id>_<uuid><ext> and hands back their public path."""

    def __init__(self, upload_dir: Optional[str] = None, max_size: Optional[int] = None):
        settings = get_settings()
        self.upload_dir = os.path.abspath(upload_dir or settings.UPLOAD_DIR)
        self.max_size = max_size if max_size is not None else settings.MAX_PICTURE_SIZE

    @property
    def picture_dir(self) -> str:
        return os.path.join(self.upload_dir, PICTURE_SUBDIR)

    def validate(self, filename: Optional[str], size: int) -> Optional[str]:
        """Return an error message for an unacceptable file, None when it is fine."""
        if not filename or size == 0:
            return "Please select a valid image file."

        ext = os.path.splitext(filename)[1].lower()
        if ext not in ALLOWED_PICTURE_EXTENSIONS:
            return "Only image files (.jpg, .jpeg, .png, .gif) are allowed."

        if size > self.max_size:
            return f"File size must be less than {self.max_size // (1024 * 1024)}MB."

        return None

    def save(self, user_id: int, filename: str, content: bytes) -> str:
        """Write the picture and return its public path."""
        ext = os.path.splitext(filename)[1].lower()
        os.makedirs(self.picture_dir, exist_ok=True)
        stored_name = f"{user_id}_{uuid.uuid4().hex}{ext}"

        with open(os.path.join(self.picture_dir, stored_name), "wb") as f:
            f.write(content)

        logger.info("Profile picture stored", user_id=user_id, file=stored_name)
        return f"{PUBLIC_PREFIX}/{PICTURE_SUBDIR}/{stored_name}"

    def resolve(self, public_path: str) -> Optional[str]:
        """Map a public path back to a file under the upload dir; None if it escapes it."""
        if not public_path.startswith(PUBLIC_PREFIX + "/"):
            return None
        relative = public_path[len(PUBLIC_PREFIX) + 1:]
        full_path = os.path.abspath(os.path.join(self.upload_dir, relative))
        if os.path.commonpath([full_path, self.upload_dir]) != self.upload_dir:
            return None
        return full_path

    def delete(self, public_path: str) -> bool:
        full_path = self.resolve(public_path)
        if full_path is None or not os.path.isfile(full_path):
            return False
        os.remove(full_path)
        logger.info("Profile picture deleted", path=public_path)
        return True
