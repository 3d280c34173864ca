"""
entropy_engine/record.py

Decoding of entropy terms.

Each term is the UTF-8 text of six space-separated fields:

    vsn partition bucket_type bucket_name key hash

  - vsn == 1  : bucket_type, bucket_name and key are plain text
  - any other : the three are base64 (standard alphabet); unknown future
                versions land here as well
  - hash is already base64 and is passed through untouched

Only terms whose partition matches the request are decoded in full, so
the partition is pulled out on its own first (term_partition).
"""

import base64
import binascii
from dataclasses import dataclass
from typing import Tuple

from entropy_engine.errors import DecodeError

NUM_FIELDS = 6


@dataclass(frozen=True)
class EntropyRecord:
    vsn: int
    bucket_type: str
    bucket_name: str
    key: str
    hash: str

    def to_doc(self) -> dict:
        """Field names as they appear in the entropy_data response."""
        return {
            "vsn": self.vsn,
            "riak_bucket_type": self.bucket_type,
            "riak_bucket_name": self.bucket_name,
            "riak_key": self.key,
            "base64_hash": self.hash,
        }


def term_text(term: bytes) -> str:
    try:
        return term.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"term is not valid UTF-8: {term!r}") from e


def term_partition(text: str) -> str:
    """Second field of the term, without splitting the rest."""
    parts = text.split(" ", 2)
    if len(parts) < 2:
        raise DecodeError(f"expected {NUM_FIELDS} fields, got {len(parts)}: {text!r}")
    return parts[1]


def _decode_base64_part(val: str) -> str:
    try:
        return base64.b64decode(val, validate=True).decode("utf-8")
    except (binascii.Error, ValueError) as e:
        # UnicodeDecodeError is a ValueError too
        raise DecodeError(f"bad base64 field {val!r}: {e}") from e


def decode_for_version(vsn: int, bucket_type: str, bucket_name: str, key: str) -> Tuple[str, str, str]:
    if vsn == 1:
        return bucket_type, bucket_name, key
    return (_decode_base64_part(bucket_type),
            _decode_base64_part(bucket_name),
            _decode_base64_part(key))


def parse_vsn(val: str) -> int:
    try:
        return int(val)
    except ValueError as e:
        raise DecodeError(f"non-numeric vsn {val!r}") from e


def decode_record(text: str) -> EntropyRecord:
    vals = text.split(" ")
    if len(vals) != NUM_FIELDS:
        raise DecodeError(f"expected {NUM_FIELDS} fields, got {len(vals)}: {text!r}")
    vsn = parse_vsn(vals[0])
    bucket_type, bucket_name, key = decode_for_version(vsn, vals[2], vals[3], vals[4])
    return EntropyRecord(vsn, bucket_type, bucket_name, key, vals[5])
