"""
Error taxonomy for the total-sales pipeline.

Every stage raises a subclass of SalesDataError. All of them are terminal for
a run; pipeline.compute_total is the only place that catches them.
"""

from __future__ import annotations

from typing import Optional


class SalesDataError(Exception):
    kind = "sales_data_error"


class AttachmentNotFound(SalesDataError):
    kind = "attachment_not_found"

    def __init__(self, name: str):
        super().__init__(f"Attachment not found: {name!r}")
        self.name = name


class InvalidSourceUrl(SalesDataError):
    kind = "invalid_source_url"


class MalformedInlineUrl(SalesDataError):
    kind = "malformed_inline_url"


class UnsupportedMediaType(SalesDataError):
    kind = "unsupported_media_type"

    def __init__(self, media_type: str):
        super().__init__(f"Unsupported media type for CSV data: {media_type!r}")
        self.media_type = media_type


class Base64DecodeError(SalesDataError):
    kind = "base64_decode_error"


class PercentDecodeError(SalesDataError):
    kind = "percent_decode_error"


class TransportError(SalesDataError):
    kind = "transport_error"

    def __init__(self, status: int, status_text: Optional[str] = None):
        super().__init__(f"Failed to fetch data: {status} {status_text or ''}".rstrip())
        self.status = status
        self.status_text = status_text or ""


class NetworkError(SalesDataError):
    kind = "network_error"


class NoSalesColumn(SalesDataError):
    kind = "no_sales_column"

    def __init__(self, message: str = "Could not identify sales column"):
        super().__init__(message)
