from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, ClassVar, Mapping

from .model import SigningCredential


class SignerParser(ABC):
    """Turns one metadata file into a signing credential."""

    @abstractmethod
    def parse(self, path: Path) -> SigningCredential:
        """Parse `path`; raise SigningMetadataError (or anything else) on failure."""
        ...


class MetadataHandler(ABC):
    # --- required by subclasses ---
    types: ClassVar[tuple[str, ...]]        # values of the metadata `type` key
    priority: ClassVar[int] = 100            # lower = preferred

    @classmethod
    @abstractmethod
    def create(cls, metadata: Mapping[str, Any], *, base_dir: Path, source: Path) -> SigningCredential:
        """Build a credential from an already-decoded metadata mapping."""
        ...

    # --- registry hook ---
    def __init_subclass__(cls, **kw):
        super().__init_subclass__(**kw)
        from .registry import _REGISTRY
        _REGISTRY.register(cls)           # noqa: E402
