"""
entropy_engine/lexicon.py

Lexicon maps each indexed field to its terms, and each term to the
docids that carry it (the term's postings):

    {
        "_yz_ed": {
            b"1 p1 A B K1 h1": [0],
            b"1 p1 A B K2 h3": [2, 7],     # re-indexed: old doc 2, new doc 7
            ...
        },
        ...
    }

Terms are raw bytes and are enumerated in ascending byte order, which is
what TermsEnum seeks over. Postings are kept sorted and deduplicated.

Stored as a pickle file for simplicity.
"""

import bisect
import pickle
from typing import Dict, List, Union


class Lexicon:
    """
    Persistent mapping from field -> term -> postings.

    Typical usage:
        lex = Lexicon()
        lex.add("_yz_ed", "1 p1 A B K1 h1", 0)
        lex.save("data/entropy.lexicon")

        # Later:
        lex2 = Lexicon.load("data/entropy.lexicon")
        terms = lex2.sorted_terms("_yz_ed")
    """
    def __init__(self):
        self.map: Dict[str, Dict[bytes, List[int]]] = {}
        self._sorted: Dict[str, List[bytes]] = {}

    def add(self, field: str, term: Union[str, bytes], docid: int):
        if isinstance(term, str):
            term = term.encode("utf-8")
        plist = self.map.setdefault(field, {}).setdefault(term, [])
        i = bisect.bisect_left(plist, docid)
        if i == len(plist) or plist[i] != docid:
            plist.insert(i, docid)
        # term order changed; rebuild lazily
        self._sorted.pop(field, None)

    def has_field(self, field: str) -> bool:
        return bool(self.map.get(field))

    def sorted_terms(self, field: str) -> List[bytes]:
        terms = self._sorted.get(field)
        if terms is None:
            terms = sorted(self.map.get(field, {}))
            self._sorted[field] = terms
        return terms

    def postings(self, field: str, term: bytes) -> List[int]:
        return self.map.get(field, {}).get(term, [])

    def num_terms(self) -> int:
        return sum(len(terms) for terms in self.map.values())

    def save(self, path):
        with open(path, "wb") as f:
            pickle.dump(self.map, f)
        print(f"[Lexicon] saved: {self.num_terms()} terms in {len(self.map)} fields to {path}")

    @classmethod
    def load(cls, path):
        with open(path, "rb") as f:
            data = pickle.load(f)
        lex = cls()
        lex.map = data
        print(f"[Lexicon] loaded: {lex.num_terms()} terms in {len(data)} fields from {path}")
        return lex
