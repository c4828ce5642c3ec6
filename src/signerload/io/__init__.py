"""Filesystem layer for signerload - finds candidate metadata files."""

# Re-export these for import convenience
from .attributes import is_hidden
from .scan import normalise_extension, scan_directory
