import dataclasses
from typing import Optional


class ErrorBase(Exception):
    pass


class SpecError(ErrorBase, ValueError):
    """
    This error class is used when an invalid format is found while parsing an
    object of a description document.
    """

    def __init__(self, message, element=None):
        super().__init__(message)
        self.message = message
        self.element = element


class InvalidIdentifierError(SpecError):
    """
    A Key or Path was constructed from a string not matching its pattern
    """

    def __init__(self, kind: str, value):
        super().__init__(f"invalid {kind} {value!r}", value)
        self.kind = kind


class UnsupportedVersionError(SpecError):
    """
    The description document is not an OpenAPI 3.0 document
    """

    pass


@dataclasses.dataclass(repr=False)
class DocumentLoadError(ErrorBase):
    """
    The description document could not be retrieved or decoded
    """

    location: str
    message: str
    status_code: Optional[int] = None

    def __str__(self):
        return f"<{self.__class__.__name__} {self.location}: {self.message}>"
