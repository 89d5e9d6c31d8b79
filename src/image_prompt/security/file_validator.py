"""
Image upload validation.

OOP: Single Responsibility - Only handles file validation.
"""

from pathlib import Path
from typing import Optional, Tuple

from PIL import Image, UnidentifiedImageError

from .exceptions import FileValidationError, InvalidInputError
from ..uploads import ImageUpload, IntakeSource

INVALID_IMAGE_MESSAGES = {
    IntakeSource.FILE_PICKER: "Please select a valid image file",
    IntakeSource.DROP: "Please drop a valid image file",
    IntakeSource.PASTE: None,
}


class FileValidator:
    """
    Validates image intake before any state is touched.
    """

    MAX_FILE_SIZE = 10 * 1024 * 1024
    ALLOWED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp", ".bmp"}
    MAX_DIMENSION = 10000

    @staticmethod
    def validate_upload(upload: ImageUpload, max_size: Optional[int] = None) -> ImageUpload:
        """
        Validate an in-memory upload.

        :param upload: Upload to validate
        :param max_size: Byte limit (defaults to MAX_FILE_SIZE)
        :return: The same upload
        :raises InvalidInputError: If the upload is not an acceptable image
        """
        max_size = max_size or FileValidator.MAX_FILE_SIZE
        user_message = INVALID_IMAGE_MESSAGES.get(upload.source)

        if not upload.is_image_type():
            raise InvalidInputError(
                f"File '{upload.filename}' has type '{upload.mime_type}', not an image",
                user_message=user_message,
            )

        if not upload.data:
            raise InvalidInputError(f"File '{upload.filename}' is empty", user_message=user_message)

        if len(upload.data) > max_size:
            raise InvalidInputError(
                f"File size {len(upload.data)} bytes exceeds maximum {max_size} bytes",
                user_message=f"Image is too large (max {max_size // (1024 * 1024)} MB)",
            )

        return upload

    @staticmethod
    def validate_image_file(file_path: str, max_size: Optional[int] = None) -> Tuple[bool, Optional[str]]:
        """
        Validate an image file on disk.

        :param file_path: Path to the file to validate
        :param max_size: Byte limit (defaults to MAX_FILE_SIZE)
        :return: Tuple of (is_valid, error_message)
        """
        path = Path(file_path)

        if not path.exists():
            return False, "File does not exist"

        if path.suffix.lower() not in FileValidator.ALLOWED_EXTENSIONS:
            allowed = ", ".join(sorted(FileValidator.ALLOWED_EXTENSIONS))
            return False, f"File extension '{path.suffix}' not allowed. Allowed: {allowed}"

        try:
            file_size = path.stat().st_size
        except OSError as e:
            return False, f"Cannot read file size: {str(e)}"

        max_size = max_size or FileValidator.MAX_FILE_SIZE
        if file_size > max_size:
            return False, f"File size {file_size} bytes exceeds maximum {max_size} bytes"

        if file_size == 0:
            return False, "File is empty"

        try:
            with Image.open(file_path) as img:
                img.verify()

            with Image.open(file_path) as img:
                if img.width > FileValidator.MAX_DIMENSION or img.height > FileValidator.MAX_DIMENSION:
                    return False, "Image dimensions too large (max 10000x10000)"

                if img.width == 0 or img.height == 0:
                    return False, "Image has invalid dimensions"

        except UnidentifiedImageError:
            return False, "File is not a valid image"
        except (OSError, SyntaxError, ValueError) as e:
            return False, f"Image validation failed: {str(e)}"

        return True, None

    @staticmethod
    def validate_file_path(file_path: str) -> str:
        """
        Resolve a file path and make sure it exists.

        :param file_path: File path to validate
        :return: Validated absolute path
        :raises FileValidationError: If path is invalid
        """
        path = Path(file_path).resolve()

        if not path.exists():
            raise FileValidationError("File path does not exist")

        if not path.is_file():
            raise FileValidationError("File path is not a regular file")

        return str(path)
