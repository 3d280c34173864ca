# entropy_engine/entropy_cursor.py
"""
Paged, resumable iteration over the entropy terms of one partition.

Each call to advance() is self-contained: it takes a snapshot (IndexReader),
an optional continuation token, a partition and a page size, and returns
one page plus, when the page is full, the token to pass next time. No
state survives between calls except that token.

Per call:
  - position: first term, or seek_ceil(decoded token)
      END       -> nothing left
      FOUND     -> that term was the last one handed out; step past it
      NOT_FOUND -> already on the first greater term; start there
  - scan: skip dead terms, skip other partitions, decode the rest
  - stop at n matches or end of terms

The token always encodes the last *matched* term, not the last scanned
one, so the next call re-reads whatever dead/foreign terms followed it.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from entropy_engine.continuation import decode_cont, encode_cont
from entropy_engine.errors import ParameterError
from entropy_engine.index_reader import IndexReader
from entropy_engine.liveness import is_live
from entropy_engine.paths import DEBUG, DEFAULT_N, ENTROPY_DATA_FIELD
from entropy_engine.record import EntropyRecord, decode_record, term_partition, term_text
from entropy_engine.terms_enum import SeekStatus


@dataclass
class PageResult:
    records: List[EntropyRecord] = field(default_factory=list)
    more: bool = False
    continuation: Optional[str] = None

    @property
    def num_found(self) -> int:
        return len(self.records)

    def to_response(self) -> dict:
        rsp = {
            "response": {
                "numFound": self.num_found,
                "docs": [r.to_doc() for r in self.records],
            },
            "more": self.more,
        }
        if self.more:
            rsp["continuation"] = self.continuation
        return rsp


def check_params(partition: Optional[str], n: int):
    if not partition:
        raise ParameterError("Parameter 'partition' is required")
    # bool is an int subclass; n=True is a caller bug, not a page size
    if isinstance(n, bool) or not isinstance(n, int):
        raise ParameterError(f"Parameter 'n' must be an integer, got {n!r}")
    if n <= 0:
        raise ParameterError(f"Parameter 'n' must be positive, got {n}")


def advance(reader: IndexReader, continuation: Optional[str], partition: str,
            n: int = DEFAULT_N, field: str = ENTROPY_DATA_FIELD) -> PageResult:
    """
    Return the next page of live records for `partition`.

    Raises ParameterError before touching the reader, and DecodeError for a
    bad token or a malformed term (the whole page is abandoned).
    """
    check_params(partition, n)
    cont = decode_cont(continuation) if continuation is not None else None

    te = reader.terms(field)
    if te is None:
        # no entropy data indexed yet
        return PageResult()

    if cont is None:
        tmp = te.next()
    else:
        if DEBUG:
            print(f"[EntropyData] continue from {cont!r}")
        status = te.seek_ceil(cont)
        if status is SeekStatus.END:
            return PageResult()
        if status is SeekStatus.FOUND:
            # handed out on the previous page
            tmp = te.next()
        else:
            tmp = te.term()

    records: List[EntropyRecord] = []
    last_matched: Optional[bytes] = None
    count = 0
    live_docs = reader.live_docs

    while tmp is not None and count < n:
        if is_live(te, live_docs):
            text = term_text(tmp)
            if DEBUG:
                print(f"[EntropyData] text: {text}")
            if term_partition(text) == partition:
                records.append(decode_record(text))
                last_matched = tmp
                count += 1
        tmp = te.next()

    if count < n:
        return PageResult(records, more=False)
    return PageResult(records, more=True, continuation=encode_cont(last_matched))


def iter_partition(reader: IndexReader, partition: str, n: int = DEFAULT_N,
                   field: str = ENTROPY_DATA_FIELD) -> Iterator[EntropyRecord]:
    """
    Yield every live record of `partition` in term order, one page at a time.
    Same result as a single unbounded scan.
    """
    cont = None
    while True:
        page = advance(reader, cont, partition, n, field)
        yield from page.records
        if not page.more:
            return
        cont = page.continuation
