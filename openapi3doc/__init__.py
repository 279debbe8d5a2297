from .identifiers import Key, Path
from .openapi import OpenAPI
from .loader import FileSystemLoader, WebLoader, ChainLoader
from .errors import SpecError, InvalidIdentifierError, UnsupportedVersionError, DocumentLoadError
from .v30 import Document, Reference, is_reference

__all__ = [
    "Key",
    "Path",
    "OpenAPI",
    "FileSystemLoader",
    "WebLoader",
    "ChainLoader",
    "SpecError",
    "InvalidIdentifierError",
    "UnsupportedVersionError",
    "DocumentLoadError",
    "Document",
    "Reference",
    "is_reference",
]
