"""
Pytest configuration and shared fixtures.
"""

from collections.abc import Iterator
from typing import Any

import pytest

from studyrag.adapters.outbound.corpus import SeedCorpusSource
from studyrag.core.ports import CorpusSourcePort
from studyrag.core.services import KnowledgeBase, PassageIndex, RetrievalService, bootstrap_index

DERIVATIVE_SENTENCES = (
    "The derivative of a function measures the instantaneous rate of change, "
    "and the derivative at a point equals the slope of the tangent line, "
    "so every derivative rule such as the power rule, the product rule and the "
    "quotient rule follows from the limit definition of the derivative applied "
    "carefully to each function",
    " Computing a derivative by hand builds intuition, because a derivative tells "
    "students how quickly a quantity grows or shrinks, and a second derivative "
    "describes the curvature and acceleration of the motion being studied",
    " A limit describes the value that a function approaches as the input "
    "approaches some point, and limits are the foundation of continuity",
)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")


class ListCorpusSource(CorpusSourcePort):
    """In-memory corpus source for tests."""

    name = "test list"

    def __init__(self, records: list[Any]) -> None:
        self.records = records

    def load(self) -> Iterator[Any]:
        yield from self.records


@pytest.fixture
def derivatives_document():
    """Math document long enough to be split into two passages."""
    return {
        "title": "Derivatives",
        "content": ".".join(DERIVATIVE_SENTENCES) + ".",
        "category": "math",
        "tags": ["calculus", "derivative"],
    }


@pytest.fixture
def sample_documents(derivatives_document):
    """A small mixed-category corpus."""
    return [
        derivatives_document,
        {
            "title": "Cell Biology",
            "content": "The cell is the basic unit of life. Every cell has a membrane.",
            "category": "science",
            "tags": ["biology"],
        },
        {
            "title": "Python Loops",
            "content": "Python loops repeat code. A for loop iterates over a sequence.",
            "category": "programming",
            "tags": ["python"],
        },
    ]


@pytest.fixture
def sample_index(sample_documents) -> PassageIndex:
    """Initialized index over the sample corpus."""
    index, _ = bootstrap_index([ListCorpusSource(sample_documents)])
    return index


@pytest.fixture
def seed_index() -> PassageIndex:
    """Initialized index over the built-in seed corpus."""
    index, _ = bootstrap_index([], fallback=SeedCorpusSource())
    return index


@pytest.fixture
def retrieval_service(sample_index) -> RetrievalService:
    return RetrievalService(KnowledgeBase(sample_index))


@pytest.fixture
def make_source():
    """Factory for in-memory corpus sources."""
    return ListCorpusSource
