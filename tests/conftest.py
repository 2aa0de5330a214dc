"""Shared fixtures: an in-memory stand-in for a Cosmos DB container."""

import re

import azure.cosmos.exceptions as exceptions
import pytest

import cosmos_db
from app_config import Settings
from cosmos_db import CosmosDBClient

COSMOS_ENV_KEYS = [
    "KEY_VAULT_URL",
    "COSMOS_CONNECTION_STRING",
    "COSMOS_ENDPOINT",
    "COSMOS_KEY",
    "COSMOS_DATABASE",
    "COSMOS_CONTAINER",
    "COSMOS_PAGE_SIZE",
    "LOG_LEVEL",
]

EQUALS_PATTERN = re.compile(r"c\.(\w+) = (@\w+)")
ARRAY_CONTAINS_PATTERN = re.compile(r"ARRAY_CONTAINS\((@\w+), c\.(\w+)\)")


class FakeItemPaged:
    def __init__(self, items, page_size):
        self.items = items
        self.page_size = page_size or len(items) or 1
        self.pages_read = 0

    def by_page(self):
        for start in range(0, len(self.items), self.page_size):
            self.pages_read += 1
            yield iter(self.items[start : start + self.page_size])


class FakeContainer:
    """Evaluates the WHERE clauses this project generates against stored dicts"""

    def __init__(self):
        self.items = {}
        self.queries = []
        self.deleted = []
        self.last_result = None

    def create_item(self, body, **kwargs):
        if body["id"] in self.items:
            raise exceptions.CosmosResourceExistsError(
                status_code=409, message="Entity with the specified id already exists"
            )
        self.items[body["id"]] = dict(body)
        return self._with_system_properties(body)

    def query_items(self, query, parameters=None, **kwargs):
        self.queries.append({"query": query, "parameters": parameters, **kwargs})
        values = {parameter["name"]: parameter["value"] for parameter in parameters or []}

        # (field, allowed values) for every clause in the WHERE
        clauses = [
            (field, [values[name]]) for field, name in EQUALS_PATTERN.findall(query)
        ]
        clauses += [
            (field, values[name])
            for name, field in ARRAY_CONTAINS_PATTERN.findall(query)
        ]

        matched = [
            self._with_system_properties(item)
            for item in self.items.values()
            if all(
                field in item and item[field] in allowed for field, allowed in clauses
            )
        ]
        self.last_result = FakeItemPaged(matched, kwargs.get("max_item_count"))
        return self.last_result

    def delete_item(self, item, partition_key, **kwargs):
        if item not in self.items or partition_key != item:
            raise exceptions.CosmosResourceNotFoundError(
                status_code=404, message="Entity with the specified id does not exist"
            )
        del self.items[item]
        self.deleted.append(item)

    @staticmethod
    def _with_system_properties(item):
        return {**item, "_rid": "rid==", "_etag": '"etag"', "_ts": 1700000000}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for key in COSMOS_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    cosmos_db.reset_cosmos_client()
    yield
    cosmos_db.reset_cosmos_client()


@pytest.fixture
def settings(monkeypatch):
    monkeypatch.setenv("COSMOS_PAGE_SIZE", "2")
    return Settings()


@pytest.fixture
def container():
    return FakeContainer()


@pytest.fixture
def client(settings, container):
    return CosmosDBClient(settings, container=container)


@pytest.fixture
def installed_client(monkeypatch, client):
    """Make handlers pick up the fake-backed client"""
    monkeypatch.setattr(cosmos_db, "_cosmos_client", client)
    return client
