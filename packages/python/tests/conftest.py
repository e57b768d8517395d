"""Shared fixtures: a small slice of the schema.org vocabulary."""

import json
from pathlib import Path

import pytest

from structured_data_validator.vocabulary import VocabularyGraph

FIXTURES = Path(__file__).parent / "fixtures"
MINI_VOCABULARY = FIXTURES / "schemaorg-mini.jsonld"


@pytest.fixture(scope="session")
def vocabulary_document():
    return json.loads(MINI_VOCABULARY.read_text(encoding="utf-8"))


@pytest.fixture(scope="session")
def vocabulary():
    return VocabularyGraph.from_file(MINI_VOCABULARY)
