import asyncio
import logging

import httpx
import pytest
from fastapi.testclient import TestClient

from app.dashboard.client import (
    PageData,
    average_value,
    count_rows,
    fetch_page,
    fetch_page_async,
    fetch_query,
    load_page,
    max_value,
)
from app.dashboard.pages import PAGES
from app.main import create_app
from tests.conftest import StubPool


ROWS = {
    "a": [{"Name": "France", "NameLength": 6}],
    "c": [{"Name": "USA", "NameLength": 3}, {"Name": "Norway", "NameLength": 6}],
}


def _handler(request: httpx.Request) -> httpx.Response:
    name = request.url.params.get("type")
    if name == "b":
        raise httpx.ConnectError("connection refused", request=request)
    if name == "html":
        return httpx.Response(502, text="<html>Bad Gateway</html>")
    if name in ROWS:
        return httpx.Response(200, json={"data": ROWS[name]})
    return httpx.Response(400, json={"error": "Invalid query type"})


@pytest.fixture
def mock_client():
    with httpx.Client(transport=httpx.MockTransport(_handler), base_url="http://dashboard") as client:
        yield client


def test_failed_fetch_does_not_abort_the_page(mock_client, caplog):
    with caplog.at_level(logging.ERROR):
        page = fetch_page(mock_client, ["a", "b", "c"])
    assert page.data == {"a": ROWS["a"], "b": [], "c": ROWS["c"]}
    assert list(page.data) == ["a", "b", "c"]
    assert page.failed == ["b"]
    assert page.loading is False
    assert "Error fetching b" in caplog.text


def test_non_json_body_yields_empty_rows(mock_client):
    page = fetch_page(mock_client, ["html", "a"])
    assert page["html"] == []
    assert page.failed == ["html"]
    assert page["a"] == ROWS["a"]


def test_error_body_yields_empty_rows(mock_client):
    assert fetch_query(mock_client, "bogus") == []


def test_fetch_page_async_matches_sequential():
    async def run():
        transport = httpx.MockTransport(_handler)
        async with httpx.AsyncClient(transport=transport, base_url="http://dashboard") as client:
            return await fetch_page_async(client, ["c", "b", "a"])

    page = asyncio.run(run())
    assert list(page.data) == ["c", "b", "a"]
    assert page.data == {"a": ROWS["a"], "b": [], "c": ROWS["c"]}
    assert page.failed == ["b"]
    assert page.loading is False


def test_load_page_through_the_api():
    pool = StubPool(rows=[{"city": "Paris", "AddressLength": 24}])
    client = TestClient(create_app(pool=pool))
    page = load_page(client, "offices")
    assert list(page.data) == list(PAGES["offices"])
    assert page.failed == []
    assert pool.acquire_calls == 2
    assert all(conn.release_calls == 1 for conn in pool.connections)


def test_load_unknown_page(mock_client):
    with pytest.raises(KeyError):
        load_page(mock_client, "billing")


def test_metric_helpers():
    page = PageData(data={
        "countryNameLength": [
            {"Name": "Philippines", "NameLength": 11},
            {"Name": "USA", "NameLength": 3},
            {"Name": None, "NameLength": None},
        ],
        "empty": [],
    }, loading=False)
    assert count_rows(page, "countryNameLength") == 3
    assert count_rows(page, "missing") == 0
    assert max_value(page, "countryNameLength", "NameLength") == 11
    assert average_value(page, "countryNameLength", "NameLength") == 7
    assert average_value(page, "countryNameLength", "Name") == 0
    assert max_value(page, "empty", "NameLength") == 0
