"""
Validated identifiers.

`Key` names an entry in one of the Components registries, `Path` names an
entry of the Paths object.  Both are `str` subclasses which can only hold
valid values: `from_string` returns None for invalid input, calling the
class directly raises `InvalidIdentifierError`.
"""

import re
from typing import Any, Optional, Pattern

from pydantic_core import core_schema

from .errors import InvalidIdentifierError


class _Identifier(str):
    pattern: Pattern[str]
    kind: str

    def __new__(cls, name: str):
        r = cls.from_string(name)
        if r is None:
            raise InvalidIdentifierError(cls.kind, name)
        return r

    @classmethod
    def from_string(cls, name: Any) -> Optional["_Identifier"]:
        if not isinstance(name, str) or cls.pattern.fullmatch(name) is None:
            return None
        return str.__new__(cls, name)

    @classmethod
    def fromString(cls, name: Any):
        return cls.from_string(name)

    @property
    def name(self) -> str:
        return str(self)

    def __repr__(self):
        return f"{self.__class__.__name__}({str.__repr__(self)})"

    def __getnewargs__(self):
        return (str(self),)

    @classmethod
    def _validate(cls, value: str):
        if isinstance(value, cls):
            return value
        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type, handler):
        return core_schema.no_info_after_validator_function(
            cls._validate,
            core_schema.str_schema(),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )


class Key(_Identifier):
    """
    The key of a `Components Object`_ map entry, ``^[a-zA-Z0-9.\\-_]+$``

    .. _Components Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#components-object
    """

    pattern = re.compile(r"[a-zA-Z0-9.\-_]+")
    kind = "Key"


class Path(_Identifier):
    """
    A relative path to an individual endpoint, as used as key in the `Paths Object`_.

    The path MUST begin with a forward slash, `{name}` placeholders are allowed
    for path templating.

    .. _Paths Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#paths-object
    """

    pattern = re.compile(r"/(?:[a-zA-Z0-9.\-_/]|\{[a-zA-Z0-9.\-_]+\})*")
    kind = "Path"

    @property
    def variables(self):
        """names of the templated path segments, in order of appearance"""
        return re.findall(r"\{([^}]+)\}", self)
