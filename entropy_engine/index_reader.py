# entropy_engine/index_reader.py
import os
from typing import Optional

from entropy_engine.lexicon import Lexicon
from entropy_engine.liveness import LiveDocs
from entropy_engine.terms_enum import TermsEnum
from entropy_engine.utils import load_live_docs
from entropy_engine.paths import LEXICON_PATH, LIVE_DOCS_PATH


class IndexReader:
    """
    Point-in-time view over the entropy index.

    - Holds the lexicon (field -> sorted terms -> postings) in memory.
    - Holds the live-docs bookkeeping taken at the same moment; None means nothing was deleted.
    - Hands out a fresh TermsEnum per call, so concurrent requests never share cursor state.
    """

    def __init__(self, lexicon: Lexicon, live_docs: Optional[LiveDocs] = None):
        self.lexicon = lexicon
        self.live_docs = live_docs

    @classmethod
    def open(cls, lexicon_path: str = LEXICON_PATH, live_docs_path: str = LIVE_DOCS_PATH):
        lexicon = Lexicon.load(lexicon_path)
        # No live-docs file: the index has never seen a delete.
        live_docs = load_live_docs(live_docs_path) if os.path.exists(live_docs_path) else None
        return cls(lexicon, live_docs)

    def terms(self, field: str) -> Optional[TermsEnum]:
        """TermsEnum over `field`, or None when no document carries it."""
        if not self.lexicon.has_field(field):
            return None
        return TermsEnum(self.lexicon.sorted_terms(field),
                         lambda t: self.lexicon.postings(field, t))
