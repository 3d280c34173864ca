# tests/conftest.py
import pytest

from entropy_engine.index_reader import IndexReader
from entropy_engine.lexicon import Lexicon
from entropy_engine.liveness import LiveDocs
from entropy_engine.paths import ENTROPY_DATA_FIELD

# Four live terms; enumerated in byte order the p2 term sorts last.
EXAMPLE_TERMS = [
    "1 p1 A B K1 h1",
    "1 p2 X Y K2 h2",
    "1 p1 A B K2 h3",
    "1 p1 A B K3 h4",
]


def _build(terms, deleted=(), field=ENTROPY_DATA_FIELD):
    """
    One doc per term: docid == position in `terms`.
    A term may also be given as (term, [docids]) to share or repeat docs.
    """
    lex = Lexicon()
    max_doc = 0
    for i, t in enumerate(terms):
        if isinstance(t, tuple):
            term, docids = t
        else:
            term, docids = t, [i]
        for d in docids:
            lex.add(field, term, d)
            max_doc = max(max_doc, d + 1)
    live_docs = LiveDocs(max_doc, deleted) if deleted else None
    return IndexReader(lex, live_docs)


@pytest.fixture
def make_reader():
    return _build


@pytest.fixture
def example_reader():
    return _build(EXAMPLE_TERMS)
