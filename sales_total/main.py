from fastapi import Depends, FastAPI
from fastapi.responses import HTMLResponse

from .attachments import DEFAULT_ATTACHMENTS, AttachmentSource, StaticAttachments
from .fetch import RemoteFetcher
from .models import HealthResponse, SalesElementSnapshot, TotalSalesRequest
from .pipeline import run
from .ui import SalesElement

app = FastAPI(
    title="sales-total",
    description="Total sales from a small CSV attachment, rendered into a result element",
    version="0.1.0",
)


def get_fetcher() -> RemoteFetcher:
    return RemoteFetcher()


def get_attachments() -> AttachmentSource:
    return DEFAULT_ATTACHMENTS


async def _render(attachments: AttachmentSource, fetcher: RemoteFetcher) -> SalesElement:
    element = SalesElement()
    await run(attachments, element, fetcher)
    return element


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.get("/total-sales", response_model=SalesElementSnapshot)
async def total_sales(
    attachments: AttachmentSource = Depends(get_attachments),
    fetcher: RemoteFetcher = Depends(get_fetcher),
):
    element = await _render(attachments, fetcher)
    return element.snapshot()


@app.post("/total-sales", response_model=SalesElementSnapshot)
async def total_sales_for(
    body: TotalSalesRequest,
    fetcher: RemoteFetcher = Depends(get_fetcher),
):
    element = await _render(StaticAttachments(body.attachments), fetcher)
    return element.snapshot()


@app.get("/", response_class=HTMLResponse)
async def page(
    attachments: AttachmentSource = Depends(get_attachments),
    fetcher: RemoteFetcher = Depends(get_fetcher),
):
    element = await _render(attachments, fetcher)
    return f"<!doctype html>\n<html><body><h1>Total sales</h1>{element.to_html()}</body></html>\n"
