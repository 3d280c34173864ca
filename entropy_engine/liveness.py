# entropy_engine/liveness.py
"""
Deleted-document bookkeeping for one index snapshot.

A term is live when at least one of the docids in its postings has not
been deleted. Tombstoned entropy terms stay in the lexicon until the
segment is rewritten, so every scan has to ask.
"""

from typing import Iterable, Optional

from entropy_engine.terms_enum import TermsEnum


class LiveDocs:
    """
    Live-doc bits for docids in [0, max_doc). Stored as the set of deleted
    docids, which stays small next to max_doc.
    """
    def __init__(self, max_doc: int, deleted: Iterable[int] = ()):
        self.max_doc = max_doc
        self.deleted = set(deleted)

    def is_live(self, docid: int) -> bool:
        return 0 <= docid < self.max_doc and docid not in self.deleted

    def delete(self, docid: int):
        self.deleted.add(docid)

    def live_count(self) -> int:
        return self.max_doc - len([d for d in self.deleted if 0 <= d < self.max_doc])


def is_live(te: TermsEnum, live_docs: Optional[LiveDocs]) -> bool:
    """True iff the current term has at least one live occurrence. live_docs=None means no deletions."""
    docids = te.docs()
    if live_docs is None:
        return bool(docids)
    return any(live_docs.is_live(d) for d in docids)
