# entropy_engine/handler.py
from typing import Mapping

from entropy_engine.entropy_cursor import advance
from entropy_engine.errors import ParameterError
from entropy_engine.index_reader import IndexReader
from entropy_engine.paths import (CONTINUE_PARAM, DEFAULT_N, ENTROPY_DATA_FIELD,
                                  N_PARAM, PARTITION_PARAM)


class EntropyDataHandler:
    """
    Request-level wrapper around entropy_cursor.advance().

    Reads the raw request parameters:
      - continue  : optional token from the previous page (blank = start over)
      - n         : page size, default 1000
      - partition : required
    and renders the page in the entropy_data response shape:
      {"response": {"numFound": k, "docs": [...]}, "more": bool, "continuation": str}
    with "continuation" present only when more is true.
    """

    description = "vector clock data iterator"
    version = "0.0.1"

    def __init__(self, reader: IndexReader, field: str = ENTROPY_DATA_FIELD):
        self.reader = reader
        self.field = field

    def handle(self, params: Mapping) -> dict:
        cont = params.get(CONTINUE_PARAM) or None
        n = self._parse_n(params.get(N_PARAM))
        partition = params.get(PARTITION_PARAM)
        page = advance(self.reader, cont, partition, n, self.field)
        return page.to_response()

    @staticmethod
    def _parse_n(raw) -> int:
        if raw is None or raw == "":
            return DEFAULT_N
        if isinstance(raw, int) and not isinstance(raw, bool):
            return raw
        try:
            return int(str(raw).strip())
        except ValueError:
            raise ParameterError(f"Parameter 'n' must be an integer, got {raw!r}")
