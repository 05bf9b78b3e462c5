import base64

import httpx
from fastapi.testclient import TestClient

from sales_total.fetch import RemoteFetcher
from sales_total.main import app, get_fetcher

client = TestClient(app)


def _data_url(text: str) -> str:
    return "data:text/csv;base64," + base64.b64encode(text.encode("utf-8")).decode("ascii")


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


def test_total_sales_default_attachment():
    r = client.get("/total-sales")
    assert r.status_code == 200
    assert r.json() == {"element_id": "total-sales", "text": "1234.56", "state": "success"}


def test_total_sales_posted_attachments():
    body = {"attachments": [{"name": "data.csv", "url": _data_url("Region;Sale\nNorth;10.5\nSouth;4\n")}]}
    r = client.post("/total-sales", json=body)
    assert r.status_code == 200
    assert r.json()["text"] == "14.50"
    assert r.json()["state"] == "success"


def test_total_sales_failure_is_rendered_not_raised():
    body = {"attachments": [{"name": "other.csv", "url": _data_url("a,b\n1,2\n")}]}
    r = client.post("/total-sales", json=body)
    assert r.status_code == 200
    assert r.json() == {"element_id": "total-sales", "text": "Error loading data", "state": "error"}


def test_total_sales_no_sales_column():
    body = {"attachments": [{"name": "data.csv", "url": _data_url("Name,City\nPaul,Montréal\n")}]}
    r = client.post("/total-sales", json=body)
    assert r.json()["state"] == "error"


def test_total_sales_remote_attachment():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/sales.csv"
        return httpx.Response(200, text="Item,Sales\nA,1\nB,2\n")

    app.dependency_overrides[get_fetcher] = lambda: RemoteFetcher(
        transport=httpx.MockTransport(handler)
    )
    try:
        body = {"attachments": [{"name": "data.csv", "url": "https://files.example.com/sales.csv"}]}
        r = client.post("/total-sales", json=body)
    finally:
        app.dependency_overrides.clear()

    assert r.json()["text"] == "3.00"


def test_page_renders_element():
    r = client.get("/")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert '<span id="total-sales" class="success">1234.56</span>' in r.text
