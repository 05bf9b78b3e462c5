"""
Source resolution: decide whether an attachment URL carries its payload
inline (a data URL) or points at a remote resource.
"""

from __future__ import annotations

import logging

from .errors import InvalidSourceUrl, MalformedInlineUrl
from .models import DataUrlParts, InlineSource, RemoteSource, Source
from .rules import BASE64_TOKEN, DATA_URL_PREFIX, DEFAULT_MEDIA_TYPE

logger = logging.getLogger(__name__)


def is_data_url(url: str) -> bool:
    return url.startswith(DATA_URL_PREFIX)


def parse_data_url(url: str) -> DataUrlParts:
    """
    Split `data:[<mediatype>][;base64],<payload>` into its parts.

    Only the first comma separates header from payload; any later comma is
    part of the payload.
    """
    if not is_data_url(url):
        raise InvalidSourceUrl("Invalid data URL")

    comma = url.find(",")
    if comma == -1:
        raise MalformedInlineUrl("Invalid data URL format")

    header = url[len(DATA_URL_PREFIX):comma]
    payload = url[comma + 1:]

    segments = header.split(";")
    media_type = segments[0] or DEFAULT_MEDIA_TYPE
    is_base64 = BASE64_TOKEN in segments

    return DataUrlParts(media_type=media_type, is_base64=is_base64, raw_payload=payload)


def resolve(url: str) -> Source:
    if is_data_url(url):
        parts = parse_data_url(url)
        logger.debug("inline source: media_type=%s base64=%s", parts.media_type, parts.is_base64)
        return InlineSource(parts=parts)

    logger.debug("remote source: %s", url)
    return RemoteSource(url=url)
