"""
Global test fixtures for the registrant console.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock)
- Connection objects bound to the mock client
- Startup resource files
- Scripted operator input
"""

from pathlib import Path
from typing import Callable, Iterable
from unittest.mock import MagicMock

import pytest

from regconsole.config import ConnectionConfig
from regconsole.database.connections import Connection


TEST_URI = "mongodb://localhost:27017/testdb"
TEST_DB = "testdb"


# =============================================================================
# MongoDB Fixtures (mongomock)
# =============================================================================

@pytest.fixture
def mock_mongo_client():
    """
    Create a mock MongoDB client using mongomock.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes.
    """
    try:
        import mongomock
        client = mongomock.MongoClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock not installed")


@pytest.fixture
def connection_config() -> ConnectionConfig:
    """Config for a local test database."""
    return ConnectionConfig(uri=TEST_URI, database_name=TEST_DB)


@pytest.fixture
def connection(mock_mongo_client, connection_config) -> Connection:
    """Session connection backed by mongomock."""
    return Connection(mock_mongo_client, connection_config)


@pytest.fixture
def registrations(connection):
    """The registrations collection of the test database."""
    return connection.registrations


@pytest.fixture
def failing_database() -> Callable[..., MagicMock]:
    """
    Factory for a MagicMock database whose command() raises.

    Usage:
        db = failing_database(OperationFailure("not authorized"), name="testdb")
    """
    def _make(error: Exception, name: str = TEST_DB) -> MagicMock:
        db = MagicMock()
        db.name = name
        db.command.side_effect = error
        return db
    return _make


# =============================================================================
# Registrant Fixtures
# =============================================================================

@pytest.fixture
def registrant_input() -> list[str]:
    """Operator answers for a new registrant, in prompt order."""
    return ["Ada Lovelace", "36", "London", "ada@example.com", "51.5072", "-0.1276"]


@pytest.fixture
def registrant_docs() -> list[dict]:
    """Stored registrants with a mix of email domains."""
    return [
        {"name": "A", "age": 30, "city": "Paris", "email": "a@x.com"},
        {"name": "B", "age": 31, "city": "Lyon", "email": "b@x.com"},
        {"name": "C", "age": 32, "city": "Nice", "email": "c@y.com"},
    ]


# =============================================================================
# Startup Resource Fixtures
# =============================================================================

@pytest.fixture
def conn_file(tmp_path) -> Callable[[str], Path]:
    """
    Write a startup resource and return its path.

    Usage:
        path = conn_file("mongodb://localhost/test\\n")
    """
    def _write(content: str) -> Path:
        path = tmp_path / "mongoConn.txt"
        path.write_text(content, encoding="utf-8")
        return path
    return _write


# =============================================================================
# Console I/O Fixtures
# =============================================================================

class ScriptedInput:
    """Replays operator answers and records prompts; EOFError when exhausted."""

    def __init__(self, answers: Iterable[str]):
        self._answers = iter(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError from None


class CapturedOutput:
    """Collects everything written to the console."""

    def __init__(self):
        self.lines: list[str] = []

    def __call__(self, text: str = "") -> None:
        self.lines.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def scripted_input() -> Callable[[Iterable[str]], ScriptedInput]:
    return ScriptedInput


@pytest.fixture
def output() -> CapturedOutput:
    return CapturedOutput()
