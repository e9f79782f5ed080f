"""
textnorm test fixtures.

Provides:
- a language-less tokenizer with stopword removal disabled
- fresh per-language stemmers
- a container double that records what language modules register
"""

from typing import Any, List

import pytest

from textnorm.core.tokenization.tokenizer import DefaultTokenizer
from textnorm.lang.en import ENGLISH
from textnorm.lang.es import SPANISH
from textnorm.lang.pt import PORTUGUESE


class RecordingContainer:
    def __init__(self):
        self.components: List[Any] = []

    def use(self, component: Any) -> None:
        self.components.append(component)


@pytest.fixture
def tokenizer():
    return DefaultTokenizer({"lowercase": True, "remove_stop_words": False})


@pytest.fixture
def en_stemmer():
    return ENGLISH.create_stemmer()


@pytest.fixture
def es_stemmer():
    return SPANISH.create_stemmer()


@pytest.fixture
def pt_stemmer():
    return PORTUGUESE.create_stemmer()


@pytest.fixture
def container():
    return RecordingContainer()
