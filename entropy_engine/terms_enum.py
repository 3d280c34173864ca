# entropy_engine/terms_enum.py
"""
Seekable, forward-only enumeration over one field's sorted terms.

Mirrors the term-enum API of the hosting search engine:
  - next()          step to the following term (None at end)
  - seek_ceil(key)  position on the first term >= key
  - term() / docs() read the current term and its postings

A fresh enum is positioned *before* the first term, so the first next()
returns the smallest term.
"""

import bisect
from enum import Enum
from typing import Callable, List, Optional, Sequence


class SeekStatus(Enum):
    FOUND = "found"          # positioned on a term equal to the key
    NOT_FOUND = "not_found"  # positioned on the first term greater than the key
    END = "end"              # every term is smaller than the key


class TermsEnum:
    """
    Cursor over a sorted term list.

    State:
      - i: index of the current term (-1 before the first next())
      - exhausted flag, set once the cursor walks off the end
    """

    __slots__ = ("terms", "postings_lookup", "i", "exhausted")

    def __init__(self, terms: Sequence[bytes], postings_lookup: Callable[[bytes], List[int]]):
        self.terms = terms
        self.postings_lookup = postings_lookup
        self.i = -1
        self.exhausted = not terms

    def term(self) -> Optional[bytes]:
        if self.exhausted or self.i < 0:
            return None
        return self.terms[self.i]

    def docs(self) -> List[int]:
        t = self.term()
        if t is None:
            return []
        return self.postings_lookup(t)

    def next(self) -> Optional[bytes]:
        """Move to the next term; None once the enum is exhausted."""
        if self.exhausted:
            return None
        self.i += 1
        if self.i >= len(self.terms):
            self.exhausted = True
            return None
        return self.terms[self.i]

    def seek_ceil(self, key: bytes) -> SeekStatus:
        """
        Position on the first term >= key (lower_bound over the whole list).
        On END the enum is exhausted and next() keeps returning None.
        """
        j = bisect.bisect_left(self.terms, key)
        if j >= len(self.terms):
            self.i = len(self.terms)
            self.exhausted = True
            return SeekStatus.END
        self.i = j
        self.exhausted = False
        if self.terms[j] == key:
            return SeekStatus.FOUND
        return SeekStatus.NOT_FOUND
