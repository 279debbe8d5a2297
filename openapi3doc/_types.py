from typing import List, Optional, TypeAlias, Union, Literal

JSON: TypeAlias = Optional[Union[dict[str, "JSON"], list["JSON"], str, int, float, bool]]
"""
Define a JSON type
https://github.com/python/typing/issues/182#issuecomment-1320974824
"""

Doc: TypeAlias = str
"""
human readable text - CommonMark syntax MAY be used for rich text representation
"""

URI: TypeAlias = str

HTTPMethodType = Literal["get", "put", "post", "delete", "options", "head", "patch", "trace"]

DocumentFormat = Literal["json", "yaml"]

__all__: List[str] = [
    "JSON",
    "Doc",
    "URI",
    "HTTPMethodType",
    "DocumentFormat",
]
