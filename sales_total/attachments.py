"""
Attachment sources.

The pipeline never reads a global list: it is handed anything with an
`attachments()` method, so a document model or a request body can supply the
attachments as easily as the built-in default.
"""

from __future__ import annotations

from typing import Iterable, List, Protocol

from .errors import AttachmentNotFound
from .models import Attachment
from .rules import ATTACHMENT_NAME, DEFAULT_ATTACHMENT_URL


class AttachmentSource(Protocol):
    def attachments(self) -> Iterable[Attachment]: ...


class StaticAttachments:
    def __init__(self, items: Iterable[Attachment]):
        self._items: List[Attachment] = list(items)

    def attachments(self) -> List[Attachment]:
        return list(self._items)


DEFAULT_ATTACHMENTS = StaticAttachments(
    [Attachment(name=ATTACHMENT_NAME, url=DEFAULT_ATTACHMENT_URL)]
)


def find_attachment(source: AttachmentSource, name: str = ATTACHMENT_NAME) -> Attachment:
    """First attachment whose name is exactly `name`."""
    for attachment in source.attachments():
        if attachment.name == name:
            return attachment
    raise AttachmentNotFound(name)
