"""signerload - bulk loading of signing credentials from metadata files."""

from .core.model import (                                              # re-export
    Candidate, Failure, SigningCredential, SigningMetadataError, Success, UnknownMetadataTypeError,
)
from .core.parser_base import MetadataHandler, SignerParser
from .core.registry import _REGISTRY                                  # singleton
from .io import is_hidden, scan_directory
from .loader import ParseTask, ResultAggregator, load, load_async

# Import parsers to trigger registration
from .parsers import KeystoreHandler, RawKeyHandler, YamlSignerParser  # noqa: F401

__all__ = [
    "load",
    "load_async",
    "scan_directory",
    "is_hidden",
    "ParseTask",
    "ResultAggregator",
    "SignerParser",
    "MetadataHandler",
    "YamlSignerParser",
    "RawKeyHandler",
    "KeystoreHandler",
    "Candidate",
    "Success",
    "Failure",
    "SigningCredential",
    "SigningMetadataError",
    "UnknownMetadataTypeError",
]
