"""
Archive Validator for OSA scan submission

Checks that the source archive can be uploaded before any request is sent.
"""

import os
from typing import Dict, Optional

from osaclient.utils.exceptions import ValidationError
from .models import ValidationResult


class ArchiveValidator:
    """Validates source archives before submission"""

    def __init__(self, max_size_mb: Optional[float] = None):
        self.max_size_mb = max_size_mb

    def validate_existence(self, file_path: str) -> ValidationResult:
        """Ensure the path names a readable regular file"""
        if not file_path or not os.path.exists(file_path):
            return ValidationResult(
                is_valid=False,
                error_message=f"Archive not found: {file_path}",
                file_path=file_path,
                validation_type="existence"
            )

        if not os.path.isfile(file_path):
            return ValidationResult(
                is_valid=False,
                error_message=f"Archive path is not a file: {file_path}",
                file_path=file_path,
                validation_type="existence"
            )

        if not os.access(file_path, os.R_OK):
            return ValidationResult(
                is_valid=False,
                error_message=f"Archive is not readable: {file_path}",
                file_path=file_path,
                validation_type="permission"
            )

        return ValidationResult(is_valid=True, file_path=file_path)

    def validate_size(self, file_path: str) -> ValidationResult:
        """Ensure the archive is within the configured size limit"""
        if self.max_size_mb is None:
            return ValidationResult(is_valid=True, file_path=file_path)

        file_size = os.path.getsize(file_path)
        size_mb = file_size / (1024 * 1024)
        if size_mb > self.max_size_mb:
            return ValidationResult(
                is_valid=False,
                error_message=f"Archive size {size_mb:.2f}MB exceeds maximum {self.max_size_mb}MB",
                file_path=file_path,
                validation_type="size"
            )

        return ValidationResult(is_valid=True, file_path=file_path)

    def validate_archive(self, file_path: str) -> ValidationResult:
        """Comprehensive validation of a single archive"""
        existence_result = self.validate_existence(file_path)
        if not existence_result.is_valid:
            return existence_result

        return self.validate_size(file_path)

    def ensure_valid(self, file_path: str) -> None:
        """Raise ValidationError when the archive cannot be submitted"""
        result = self.validate_archive(file_path)
        if not result.is_valid:
            raise ValidationError(result.error_message, file_path=file_path)

    def get_archive_summary(self, file_path: str) -> Dict:
        """Get summary information about an archive"""
        if not os.path.exists(file_path):
            return {
                "exists": False,
                "error": "File not found"
            }

        stat = os.stat(file_path)
        return {
            "exists": True,
            "name": os.path.basename(file_path),
            "size_bytes": stat.st_size,
            "size_mb": stat.st_size / (1024 * 1024),
        }
