from __future__ import annotations

from pathlib import Path

import yaml

from ..core.model import SigningCredential, SigningMetadataError
from ..core.parser_base import SignerParser
from ..core.registry import _REGISTRY, MetadataRegistry


class MetadataLoader(yaml.SafeLoader):
    """SafeLoader that keeps integer-looking scalars, such as hex keys, as strings."""


MetadataLoader.yaml_implicit_resolvers = {
    first: [(tag, rx) for tag, rx in resolvers if tag != "tag:yaml.org,2002:int"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class YamlSignerParser(SignerParser):
    """Reads a YAML metadata file and dispatches on its `type` key."""

    def __init__(self, registry: MetadataRegistry | None = None):
        self.registry = registry or _REGISTRY

    def parse(self, path: Path) -> SigningCredential:
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SigningMetadataError(f"Unable to read metadata file {path}") from e

        try:
            metadata = yaml.load(text, Loader=MetadataLoader)
        except yaml.YAMLError as e:
            raise SigningMetadataError(f"Invalid YAML in metadata file {path}") from e

        if not isinstance(metadata, dict):
            raise SigningMetadataError(f"Metadata file {path} does not contain a mapping")
        if "type" not in metadata:
            raise SigningMetadataError(f"Metadata file {path} has no 'type'")

        handler = self.registry.choose(metadata["type"])
        try:
            return handler.create(metadata, base_dir=path.parent, source=path)
        except SigningMetadataError:
            raise
        except Exception as e:
            raise SigningMetadataError(f"Failed to create signer from {path}") from e
