from __future__ import annotations

import json
from pathlib import Path
from typing import Any, ClassVar, Mapping

from ..core.model import SigningCredential, SigningMetadataError
from ..core.parser_base import MetadataHandler
from .raw import PUBLIC_KEY_LEN, decode_hex, require


def _resolve(base_dir: Path, value: Any) -> Path:
    p = Path(str(value)).expanduser()
    return p if p.is_absolute() else base_dir / p


class KeystoreHandler(MetadataHandler):
    """EIP-2335 keystore referenced by path, with its password in a side file.

    Only the keystore's public key is read here. The crypto section is kept
    encrypted; the signing layer decrypts it with the stored password.
    """

    types: ClassVar = ("file-keystore",)
    priority: ClassVar = 20

    @classmethod
    def create(cls, metadata: Mapping[str, Any], *, base_dir: Path, source: Path) -> SigningCredential:
        keystore_file = _resolve(base_dir, require(metadata, "keystoreFile"))
        password_file = _resolve(base_dir, require(metadata, "keystorePasswordFile"))

        try:
            keystore = json.loads(keystore_file.read_text(encoding="utf-8"))
        except OSError as e:
            raise SigningMetadataError(f"Unable to read keystore file {keystore_file}") from e
        except ValueError as e:
            raise SigningMetadataError(f"Keystore file {keystore_file} is not valid JSON") from e

        if not isinstance(keystore, dict):
            raise SigningMetadataError(f"Keystore file {keystore_file} is not a JSON object")
        if not isinstance(keystore.get("crypto"), dict):
            raise SigningMetadataError(f"Keystore file {keystore_file} has no crypto section")
        public = decode_hex(require(keystore, "pubkey"), name="pubkey", length=PUBLIC_KEY_LEN)

        try:
            password = password_file.read_text(encoding="utf-8").rstrip("\r\n")
        except OSError as e:
            raise SigningMetadataError(f"Unable to read keystore password file {password_file}") from e

        return SigningCredential(
            identifier="0x" + public.hex(),
            key_type="file-keystore",
            source=source,
            keystore_file=keystore_file,
            keystore_password=password,
        )
