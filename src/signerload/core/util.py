from __future__ import annotations
from typing import Any, Dict, Iterable

from .model import SigningCredential


def root_cause(exc: BaseException) -> BaseException:
    """Follow the exception chain down to the innermost failure."""
    seen = {id(exc)}
    current = exc
    while True:
        nxt = current.__cause__
        if nxt is None and not current.__suppress_context__:
            nxt = current.__context__
        if nxt is None or id(nxt) in seen:
            return current
        seen.add(id(nxt))
        current = nxt


def root_cause_message(exc: BaseException) -> str:
    root = root_cause(exc)
    return str(root) or type(root).__name__


def credential_asdict(cred: SigningCredential, *, fields: Iterable[str] | None = None) -> Dict[str, Any]:
    """Return a JSON-serialisable dict (skip None, never secrets) optionally filtered."""
    payload = {
        "identifier": cred.identifier,
        "key_type": cred.key_type,
        "source": str(cred.source) if cred.source is not None else None,
        "keystore_file": str(cred.keystore_file) if cred.keystore_file is not None else None,
    }
    payload = {k: v for k, v in payload.items() if v is not None}
    if fields:
        wanted = set(fields)
        payload = {k: v for k, v in payload.items() if k in wanted}
    return payload
