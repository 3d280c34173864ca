# entropy_engine/continuation.py
"""
Continuation tokens: the raw bytes of the last term handed out, wrapped
for transport in a query string.

Tokens are written with the URL-safe base64 alphabet (-, _) and no '='
padding. Reading accepts either alphabet, padded or not, so tokens
minted by older handlers with '+' and '/' still resume correctly.
"""

import base64
import binascii

from entropy_engine.errors import DecodeError


def encode_cont(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def decode_cont(token: str) -> bytes:
    if not token:
        raise DecodeError("empty continuation token")
    s = token.strip().rstrip("=")
    s += "=" * (-len(s) % 4)
    try:
        # altchars maps '-_' onto '+/', and '+/' stay valid as-is
        return base64.b64decode(s, altchars=b"-_", validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"malformed continuation token {token!r}: {e}") from e
