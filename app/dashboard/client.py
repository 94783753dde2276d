"""Fetch helpers used by dashboard pages to assemble their chart data.

Each query is fetched independently; a failure for one name is logged and
replaced by an empty result so the rest of the page still renders.
"""
import asyncio
import logging
from dataclasses import dataclass, field
from numbers import Number
from typing import Any, Dict, Iterable, List

import httpx

from app.dashboard.pages import page_queries


logger = logging.getLogger(__name__)

ANALYTICS_PATH = "/api/analytics"

Rows = List[Dict[str, Any]]


@dataclass
class PageData:
    """Results for one page keyed by query name."""
    data: Dict[str, Rows] = field(default_factory=dict)
    failed: List[str] = field(default_factory=list)
    loading: bool = True

    def __getitem__(self, name: str) -> Rows:
        return self.data[name]


def _rows(body: Any) -> Rows:
    if isinstance(body, dict):
        return body.get("data") or []
    return []


def fetch_query(client: httpx.Client, name: str) -> Rows:
    """Fetch one named query; error bodies yield an empty list."""
    response = client.get(ANALYTICS_PATH, params={"type": name})
    return _rows(response.json())


async def fetch_query_async(client: httpx.AsyncClient, name: str) -> Rows:
    response = await client.get(ANALYTICS_PATH, params={"type": name})
    return _rows(response.json())


def fetch_page(client: httpx.Client, names: Iterable[str]) -> PageData:
    """Fetch `names` one after another and assemble them into a PageData."""
    page = PageData()
    for name in names:
        try:
            page.data[name] = fetch_query(client, name)
        except Exception as e:
            logger.error("Error fetching %s: %s", name, e)
            page.data[name] = []
            page.failed.append(name)
    page.loading = False
    return page


async def fetch_page_async(client: httpx.AsyncClient, names: Iterable[str]) -> PageData:
    """Concurrent variant of fetch_page; the result keeps the order of `names`."""
    names = list(names)
    results = await asyncio.gather(
        *(fetch_query_async(client, name) for name in names),
        return_exceptions=True,
    )
    page = PageData()
    for name, result in zip(names, results):
        if isinstance(result, BaseException):
            logger.error("Error fetching %s: %s", name, result)
            page.data[name] = []
            page.failed.append(name)
        else:
            page.data[name] = result
    page.loading = False
    return page


def load_page(client: httpx.Client, page: str) -> PageData:
    return fetch_page(client, page_queries(page))


def _numbers(rows: Rows, column: str) -> List[float]:
    values = []
    for row in rows:
        value = row.get(column)
        if isinstance(value, bool) or not isinstance(value, Number):
            continue
        values.append(float(value))
    return values


def count_rows(page: PageData, name: str) -> int:
    return len(page.data.get(name, []))


def max_value(page: PageData, name: str, column: str) -> float:
    values = _numbers(page.data.get(name, []), column)
    return max(values) if values else 0


def average_value(page: PageData, name: str, column: str) -> float:
    """Mean of the numeric values in `column`, for metric cards."""
    values = _numbers(page.data.get(name, []), column)
    return sum(values) / len(values) if values else 0
