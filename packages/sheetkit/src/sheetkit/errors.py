"""Error codes, structured error model, and raisable exceptions for sheetkit.

``ErrorCode`` lists every error/warning code the conversion pipeline can
produce.  ``IngestError`` is the Pydantic data model describing one error;
``SheetkitException`` and its subclasses wrap that model so it can be used
with ``raise``/``except`` and mapped onto a response status by the caller.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Normalized error codes for the sheetkit pipeline.

    Values equal their names so they are stable strings suitable for
    metrics and alerting.  ``E_`` prefix = fatal, ``W_`` prefix = warning.
    """

    # Request
    E_REQUEST_MISSING_FIELD = "E_REQUEST_MISSING_FIELD"
    E_REQUEST_UNSUPPORTED_FORMAT = "E_REQUEST_UNSUPPORTED_FORMAT"

    # Security
    E_SECURITY_TOO_LARGE = "E_SECURITY_TOO_LARGE"

    # Parse
    E_PARSE_OPEN_FAILED = "E_PARSE_OPEN_FAILED"
    E_PARSE_SHEET_READ = "E_PARSE_SHEET_READ"
    E_PARSE_DELIMITED = "E_PARSE_DELIMITED"

    # Classification
    E_CLASSIFY_UNKNOWN_VARIANT = "E_CLASSIFY_UNKNOWN_VARIANT"

    # Warnings (non-fatal)
    W_DATE_CONVERSION_FAILED = "W_DATE_CONVERSION_FAILED"


class IngestError(BaseModel):
    """Structured error with code, message, and location context.

    Note: This is a Pydantic model (data structure), not a Python Exception.
    To raise errors, use one of the ``SheetkitException`` subclasses, which
    wrap this model.
    """

    code: ErrorCode
    message: str
    stage: str | None = None
    sheet_name: str | None = None
    recoverable: bool = False


class SheetkitException(Exception):
    """Raisable exception wrapping an ``IngestError`` data model.

    Carries the structured ``IngestError`` as the ``.error`` attribute for
    inspection and serialization.  ``http_status`` is the response status a
    request layer should answer with.
    """

    http_status: int = 500

    def __init__(self, **kwargs: object) -> None:
        self.error = IngestError(**kwargs)  # type: ignore[arg-type]
        super().__init__(self.error.message)

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def stage(self) -> str | None:
        return self.error.stage

    @property
    def sheet_name(self) -> str | None:
        return self.error.sheet_name


class RequestError(SheetkitException):
    """The request itself is unusable: missing input or unknown format."""

    http_status = 400


class IngestionError(SheetkitException):
    """The input could not be read into a table.

    Raised for container open failures, per-sheet read failures, and
    malformed delimited text.  Ingestion never returns a partial table.
    """

    http_status = 500


class ClassificationDefect(SheetkitException):
    """A raw value outside the closed variant set reached the classifier.

    This is a programming defect in a workbook source, not a user error.
    """

    http_status = 500
