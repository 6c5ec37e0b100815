"""Pre-flight checks run before any ingestion begins.

Rejects requests that are missing required inputs or exceed the configured
size limit.  Fatal errors (``E_*`` codes) mean the request must not be
processed further.
"""

from __future__ import annotations

import logging

from sheetkit.config import SheetConverterConfig
from sheetkit.errors import ErrorCode, IngestError

logger = logging.getLogger("sheetkit")


class SheetSecurityScanner:
    """Run pre-flight checks on one conversion request."""

    def __init__(self, config: SheetConverterConfig) -> None:
        self.config = config

    def scan(
        self,
        raw_bytes: bytes | None,
        source_name: str | None,
        requested_format: str | None,
    ) -> list[IngestError]:
        """Run all pre-flight checks.

        Returns:
            List of errors.  Checks stop at the first missing field.
        """
        errors: list[IngestError] = []

        # --- 1. Required fields ---
        for field, value in (
            ("format", requested_format),
            ("file name", source_name),
            ("file", raw_bytes),
        ):
            if value is None or (isinstance(value, str) and not value):
                errors.append(
                    IngestError(
                        code=ErrorCode.E_REQUEST_MISSING_FIELD,
                        message=f"Missing '{field}'",
                        stage="security",
                    )
                )
                return errors

        # --- 2. Size limit ---
        max_bytes = self.config.max_file_size_mb * 1024 * 1024
        if len(raw_bytes) > max_bytes:
            errors.append(
                IngestError(
                    code=ErrorCode.E_SECURITY_TOO_LARGE,
                    message=(
                        f"File size {len(raw_bytes)} bytes exceeds limit of "
                        f"{max_bytes} bytes ({self.config.max_file_size_mb} MB)"
                    ),
                    stage="security",
                )
            )

        return errors
