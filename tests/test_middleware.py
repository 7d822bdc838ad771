"""
Unit tests for request logging helpers
"""

import json
import logging

import pytest

from jydb.logging import (
    clear_request_context,
    configure_logging,
    generate_request_id,
    get_request_id,
    set_request_context,
)
from jydb.middleware import graphql_operation_name


@pytest.mark.parametrize(
    "payload, expected",
    [
        ({"operationName": "AddGroup", "query": "mutation AddGroup { x }"}, "AddGroup"),
        ({"query": "query FindGroup($id: ID!) { findGroup(id: $id) { id } }"}, "FindGroup"),
        ({"query": "mutation { addGroup(name: \"G1\", animators: []) { id } }"}, "mutation:addGroup"),
        ({"query": "{ allGroups { id } }"}, "allGroups"),
        ({"query": "query IntrospectionQuery { __schema { types { name } } }"}, "__introspection"),
        ({"query": ""}, None),
        ({}, None),
    ],
)
def test_graphql_operation_name(payload, expected):
    assert graphql_operation_name(payload) == expected


def test_request_context():
    request_id = set_request_context()

    assert get_request_id() == request_id
    assert len(request_id) == 14

    clear_request_context()
    assert get_request_id() is None


def test_explicit_request_id():
    set_request_context("req-123")

    assert get_request_id() == "req-123"
    clear_request_context()


def test_request_ids_are_unique():
    assert len({generate_request_id() for _ in range(100)}) == 100


@pytest.fixture
def json_logging(capsys):
    """JSON logging bound to the captured stdout, restored afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    configure_logging()
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_stdlib_records_carry_request_id(json_logging, capsys):
    set_request_context("req-9")
    logging.getLogger("jydb.tests").warning("stdlib record")
    clear_request_context()

    line = capsys.readouterr().out.strip().splitlines()[-1]
    event = json.loads(line)
    assert event["event"] == "stdlib record"
    assert event["request_id"] == "req-9"
