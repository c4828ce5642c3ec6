"""Metadata parsers for signerload."""

from .keystore import KeystoreHandler
from .raw import RawKeyHandler
from .yaml_parser import YamlSignerParser
