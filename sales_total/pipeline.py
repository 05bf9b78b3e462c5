"""
Total-sales pipeline.

attachment -> source -> text (decode or fetch) -> table -> total -> element

compute_total returns an explicit outcome instead of raising, and run applies
that outcome to the element exactly once. A run is all-or-nothing: there is
no partial result and no retry.
"""

from __future__ import annotations

import logging
from typing import Optional

from .aggregate import aggregate
from .attachments import AttachmentSource, find_attachment
from .decode import decode
from .errors import SalesDataError
from .fetch import RemoteFetcher
from .models import InlineSource, PipelineFailed, PipelineOutcome, TotalComputed
from .numbers import format_total
from .parser import parse
from .rules import ATTACHMENT_NAME
from .source import resolve
from .ui import SalesElement

logger = logging.getLogger(__name__)


async def load_csv_text(url: str, fetcher: Optional[RemoteFetcher] = None) -> str:
    source = resolve(url)
    if isinstance(source, InlineSource):
        return decode(source.parts)

    fetcher = fetcher or RemoteFetcher()
    return await fetcher.fetch(source.url)


async def compute_total(
    attachments: AttachmentSource,
    fetcher: Optional[RemoteFetcher] = None,
    name: str = ATTACHMENT_NAME,
) -> PipelineOutcome:
    try:
        attachment = find_attachment(attachments, name)
        text = await load_csv_text(attachment.url, fetcher)
        total = aggregate(parse(text))
    except SalesDataError as e:
        logger.error("Error processing sales data: %s", e, exc_info=True)
        return PipelineFailed(error_kind=e.kind, message=str(e))

    return TotalComputed(total=total, display=format_total(total))


def apply_outcome(outcome: PipelineOutcome, element: SalesElement) -> None:
    if isinstance(outcome, TotalComputed):
        element.show_total(outcome.display)
    else:
        element.show_error()


async def run(
    attachments: AttachmentSource,
    element: SalesElement,
    fetcher: Optional[RemoteFetcher] = None,
    name: str = ATTACHMENT_NAME,
) -> PipelineOutcome:
    try:
        outcome = await compute_total(attachments, fetcher, name)
    except Exception as e:
        # Anything outside the taxonomy still must not leave the element loading.
        logger.exception("Unexpected failure while computing total sales")
        outcome = PipelineFailed(error_kind="unexpected_error", message=str(e))

    apply_outcome(outcome, element)
    return outcome
