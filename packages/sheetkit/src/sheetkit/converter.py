"""SheetConverter -- dispatch layer and public API for sheetkit.

Routes one conversion request through the pipeline:

1. Pre-flight checks via :class:`SheetSecurityScanner`.
2. Resolve the serializer for the requested format.
3. Ingest with the delimited-text adapter (``.csv``) or the
   sheet-container adapter (anything else).
4. Serialize the :class:`Table` and return a :class:`ConversionResult`.

Each call builds and discards its own table; a converter holds only
immutable configuration and may be shared between concurrent requests.
"""

from __future__ import annotations

import asyncio
import logging
import time

from sheetkit.adapters import read_delimited, read_workbook
from sheetkit.config import SheetConverterConfig
from sheetkit.errors import ErrorCode, RequestError, SheetkitException
from sheetkit.models import ConversionResult, Table
from sheetkit.security import SheetSecurityScanner
from sheetkit.serializers import default_serializers

logger = logging.getLogger("sheetkit")


class SheetConverter:
    """Top-level orchestrator for the sheetkit pipeline.

    Parameters
    ----------
    config:
        Pipeline configuration.  Uses defaults when *None*.
    """

    def __init__(self, config: SheetConverterConfig | None = None) -> None:
        self._config = config or SheetConverterConfig()
        self._serializers = default_serializers(self._config)
        self._security_scanner = SheetSecurityScanner(self._config)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def formats(self) -> list[str]:
        """Supported format names."""
        return list(self._serializers)

    def is_delimited(self, source_name: str) -> bool:
        """Return True if *source_name* ends with ``.csv`` (case-insensitive)."""
        return source_name.lower().endswith(".csv")

    def ingest(self, raw_bytes: bytes, source_name: str) -> Table:
        """Read *raw_bytes* into a ``Table`` using the adapter for *source_name*."""
        if self.is_delimited(source_name):
            return read_delimited(raw_bytes, self._config)
        return read_workbook(raw_bytes, self._config)

    def convert(
        self,
        raw_bytes: bytes | None,
        source_name: str | None,
        requested_format: str | None,
    ) -> ConversionResult:
        """Convert one uploaded file into the requested text format.

        Parameters
        ----------
        raw_bytes:
            The uploaded file contents.
        source_name:
            Original file name; its suffix selects the adapter.
        requested_format:
            One of :attr:`formats` (exact, case-sensitive match).

        Returns
        -------
        ConversionResult
            The payload and its content type.

        Raises
        ------
        RequestError
            Missing input, oversized input, or unsupported format.
        IngestionError
            The input could not be read.
        ClassificationDefect
            A workbook source produced a value outside the raw variant set.
        """
        start = time.monotonic()

        # ==============================================================
        # Step 1: Pre-flight Checks
        # ==============================================================
        fatal_errors = self._security_scanner.scan(
            raw_bytes, source_name, requested_format
        )
        if fatal_errors:
            err = fatal_errors[0]
            logger.error(
                "sheetkit | file=%s | code=%s | detail=%s",
                source_name,
                err.code.value,
                err.message,
            )
            raise RequestError(**err.model_dump())

        # ==============================================================
        # Step 2: Resolve Serializer
        # ==============================================================
        serializer = self._serializers.get(requested_format)
        if serializer is None:
            logger.error(
                "sheetkit | file=%s | code=%s | detail=format=%r",
                source_name,
                ErrorCode.E_REQUEST_UNSUPPORTED_FORMAT.value,
                requested_format,
            )
            raise RequestError(
                code=ErrorCode.E_REQUEST_UNSUPPORTED_FORMAT,
                message=(
                    f"Unsupported format '{requested_format}'. "
                    f"Use one of: {', '.join(self._serializers)}."
                ),
                stage="dispatch",
            )

        # ==============================================================
        # Step 3: Ingest
        # ==============================================================
        try:
            table = self.ingest(raw_bytes, source_name)
        except SheetkitException as exc:
            logger.error(
                "sheetkit | file=%s | code=%s | detail=%s",
                source_name,
                exc.code.value,
                exc.message,
            )
            raise

        # ==============================================================
        # Step 4: Serialize
        # ==============================================================
        payload, content_type = serializer(table)

        elapsed = time.monotonic() - start
        logger.info(
            "sheetkit | file=%s | format=%s | sheets=%d | cells=%d | time=%.3fs",
            source_name,
            requested_format,
            len(table.sheets),
            len(table.cells),
            elapsed,
        )

        return ConversionResult(
            payload=payload,
            content_type=content_type,
            format=requested_format,
        )

    async def aconvert(
        self,
        raw_bytes: bytes | None,
        source_name: str | None,
        requested_format: str | None,
    ) -> ConversionResult:
        """Async wrapper around :meth:`convert`.

        Offloads the synchronous ``convert()`` call to a thread via
        ``asyncio.to_thread()``.
        """
        return await asyncio.to_thread(
            self.convert, raw_bytes, source_name, requested_format
        )
