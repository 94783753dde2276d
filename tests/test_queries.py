import re

import pytest

from app.analytics.errors import InvalidQuery
from app.analytics.metadata import QUERY_INFO, list_query_info
from app.analytics.queries import QUERIES, query_names, resolve
from app.dashboard.pages import PAGES


MUTATING = re.compile(r"\b(insert|update|delete|drop|create|alter|truncate|replace\s+into|grant)\b", re.IGNORECASE)


def test_registry_has_thirty_queries():
    assert len(QUERIES) == 30
    assert query_names()[0] == "countryNameLength"


@pytest.mark.parametrize("name", list(QUERIES))
def test_every_query_resolves_to_a_select(name):
    sql = resolve(name)
    assert sql.strip()
    assert sql.strip().upper().startswith("SELECT")
    assert not MUTATING.search(sql)
    assert ";" not in sql


@pytest.mark.parametrize("name", ["", None, "bogus", "countrynamelength", "countryNameLength "])
def test_unknown_names_raise_invalid_query(name):
    with pytest.raises(InvalidQuery):
        resolve(name)


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        QUERIES["countryNameLength"] = "DELETE FROM customers"
    with pytest.raises(TypeError):
        del QUERIES["countryNameLength"]


def test_capitalization_categories_are_unchanged():
    sql = resolve("customerNameCapitalization")
    for label in ("'ALL_CAPS'", "'all_lower'", "'Title_Case'", "'Mixed_Case'"):
        assert label in sql
    assert "CONCAT(UPPER(LEFT(customerName, 1)), LOWER(SUBSTRING(customerName, 2)))" in sql


def test_metadata_covers_the_registry():
    assert set(QUERY_INFO) == set(QUERIES)
    assert [name for name, _ in list_query_info()] == list(QUERIES)
    for name, info in QUERY_INFO.items():
        assert info.title
        assert info.description
        for table in info.tables:
            assert table in ("customers", "products", "employees", "offices")
            assert table in resolve(name)


def test_pages_only_reference_registered_queries():
    for page, names in PAGES.items():
        assert names, page
        assert len(set(names)) == len(names)
        for name in names:
            assert name in QUERIES
