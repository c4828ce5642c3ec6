from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Mapping

from ..core.model import SigningCredential, SigningMetadataError
from ..core.parser_base import MetadataHandler

PRIVATE_KEY_LEN = 32
PUBLIC_KEY_LEN = 48            # compressed BLS12-381 G1 point


def decode_hex(value: Any, *, name: str, length: int) -> bytes:
    """Decode an optionally 0x-prefixed hex string of exactly `length` bytes."""
    if not isinstance(value, str):
        raise SigningMetadataError(f"'{name}' must be a hex string")
    text = value.strip()
    if text[:2].lower() == "0x":
        text = text[2:]
    try:
        raw = bytes.fromhex(text)
    except ValueError as e:
        raise SigningMetadataError(f"'{name}' is not valid hex") from e
    if len(raw) != length:
        raise SigningMetadataError(f"'{name}' must be {length} bytes, got {len(raw)}")
    return raw


def require(metadata: Mapping[str, Any], key: str) -> Any:
    value = metadata.get(key)
    if value is None or value == "":
        raise SigningMetadataError(f"Missing required metadata field '{key}'")
    return value


class RawKeyHandler(MetadataHandler):
    """Unencrypted key pair held directly in the metadata file."""

    types: ClassVar = ("file-raw",)
    priority: ClassVar = 10

    @classmethod
    def create(cls, metadata: Mapping[str, Any], *, base_dir: Path, source: Path) -> SigningCredential:
        secret = decode_hex(require(metadata, "privateKey"), name="privateKey", length=PRIVATE_KEY_LEN)
        public = decode_hex(require(metadata, "publicKey"), name="publicKey", length=PUBLIC_KEY_LEN)
        return SigningCredential(
            identifier="0x" + public.hex(),
            key_type="file-raw",
            source=source,
            secret=secret,
        )
