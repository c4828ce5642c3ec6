from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union


@dataclass(frozen=True, slots=True)
class Candidate:
    path: Path
    extension: str             # as configured, lower-case, no dot


@dataclass(frozen=True, slots=True)
class SigningCredential:
    """A signing identity produced by a metadata parser."""
    identifier: str            # 0x-prefixed lower-case public key hex
    key_type: str
    source: Path | None = None
    secret: bytes | None = field(default=None, repr=False, compare=False)
    keystore_file: Path | None = None
    keystore_password: str | None = field(default=None, repr=False, compare=False)


@dataclass(frozen=True, slots=True)
class Success:
    candidate: Candidate
    credential: SigningCredential
    success: bool = field(default=True, init=False)


@dataclass(frozen=True, slots=True)
class Failure:
    candidate: Candidate
    error: BaseException
    success: bool = field(default=False, init=False)


ParseOutcome = Union[Success, Failure]


class SigningMetadataError(RuntimeError):
    """Raised when a metadata file cannot be turned into a signing credential."""
    pass


class UnknownMetadataTypeError(SigningMetadataError):
    """Raised when no handler is registered for a metadata type."""
    pass
