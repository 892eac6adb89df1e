"""24-hex record identifiers that sort by creation time.

Layout: 4-byte unix seconds, 5 random bytes fixed per process, 3-byte counter.
"""
import json
import os
import re
import secrets
import threading
import time

from careerbridge.core.errors import ValidationError

_REF_RE = re.compile(r"^[0-9a-fA-F]{24}$")
_WRAPPED_RE = re.compile(r"""^ObjectId\(\s*["']?([0-9a-fA-F]{24})["']?\s*\)$""")

_process_random = os.urandom(5)
_counter = secrets.randbelow(0xFFFFFF)
_counter_lock = threading.Lock()


def generate_ref() -> str:
    global _counter
    with _counter_lock:
        _counter = (_counter + 1) % 0x1000000
        count = _counter
    return (
        int(time.time()).to_bytes(4, "big")
        + _process_random
        + count.to_bytes(3, "big")
    ).hex()


def is_ref(value) -> bool:
    return isinstance(value, str) and bool(_REF_RE.match(value))


def parse_ref(value) -> str:
    if not is_ref(value):
        raise ValidationError(f"Invalid reference: {value!r}")
    return value.lower()


def coerce_record_id(value) -> str:
    """
    Normalize an id supplied by a caller to the stored lookup key.
    Accepts a plain ref, a wrapped legacy form (ObjectId("...") or {"$oid": "..."}),
    or any other non-empty string, which is looked up verbatim.
    """
    if isinstance(value, dict) and is_ref(value.get("$oid")):
        return value["$oid"].lower()
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Record id is required")
    raw = value.strip()
    if is_ref(raw):
        return raw.lower()
    wrapped = _WRAPPED_RE.match(raw)
    if wrapped:
        return wrapped.group(1).lower()
    if raw.startswith("{"):
        try:
            decoded = json.loads(raw)
        except ValueError:
            return raw
        if isinstance(decoded, dict) and is_ref(decoded.get("$oid")):
            return decoded["$oid"].lower()
    return raw
