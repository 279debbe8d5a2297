import json
import logging
import pathlib
import typing
from typing import Any, Callable, Dict, Optional, Union, cast

import httpx
import yaml
import yarl

from . import log
from . import v30
from .errors import DocumentLoadError, UnsupportedVersionError
from .loader import Loader, NullLoader

if typing.TYPE_CHECKING:
    from ._types import JSON, DocumentFormat


class OpenAPI:
    """
    An OpenAPI 3.0 description document, parsed into the `v30.Document` model.
    """

    _root: v30.Document

    @property
    def document(self) -> v30.Document:
        return self._root

    @property
    def paths(self):
        return self._root.paths

    @property
    def components(self):
        return self._root.components

    @property
    def info(self):
        return self._root.info

    @property
    def openapi(self):
        return self._root.openapi

    @property
    def servers(self):
        return self._root.servers

    @classmethod
    def load_sync(
        cls,
        url: str,
        session_factory: Callable[..., httpx.Client] = httpx.Client,
        loader: Optional[Loader] = None,
    ) -> "OpenAPI":
        """
        Create an OpenAPI object from a description document retrieved via http/s.

        :param url: the url of the description document
        :param session_factory: used to create the session for http/s io
        :param loader: the backend used to parse the description document
        """
        with session_factory() as client:
            resp = client.get(url)
        return cls._load_response(url, resp, loader)

    @classmethod
    async def load_async(
        cls,
        url: str,
        session_factory: Callable[..., httpx.AsyncClient] = httpx.AsyncClient,
        loader: Optional[Loader] = None,
    ) -> "OpenAPI":
        """
        Create an OpenAPI object from a description document retrieved via http/s.

        :param url: the url of the description document
        :param session_factory: used to create the session for http/s io
        :param loader: the backend used to parse the description document
        """
        async with session_factory() as client:
            resp = await client.get(url)
        return cls._load_response(url, resp, loader)

    @classmethod
    def _load_response(cls, url, resp: httpx.Response, loader: Optional[Loader]):
        if resp.is_redirect:
            raise DocumentLoadError(url, f'Redirect to {resp.headers.get("Location","")}', resp.status_code)
        if not resp.is_success:
            raise DocumentLoadError(url, f"unexpected status {resp.status_code}", resp.status_code)
        return cls.loads(url, resp.text, loader)

    @classmethod
    def load_file(
        cls,
        url: str,
        path: Union[str, pathlib.Path, yarl.URL],
        loader: Loader,
    ) -> "OpenAPI":
        """
        Create an OpenAPI object from a description document file.

        :param url: the fictive url of the description document
        :param path: description document location
        :param loader: the backend to access the description document
        """
        if not isinstance(path, yarl.URL):
            path = yarl.URL(str(path))
        data = loader.get(path)
        return cls(url, data)

    @classmethod
    def loads(
        cls,
        url: str,
        data: str,
        loader: Optional[Loader] = None,
    ) -> "OpenAPI":
        """

        :param url: the url of the description document - the suffix selects json or yaml
        :param data: description document
        :param loader: the backend used to parse the description document
        """
        if loader is None:
            loader = NullLoader()
        document = loader.parse(yarl.URL(url), data)
        return cls(url, document)

    @classmethod
    def _parse_obj(cls, document: "JSON") -> v30.Document:
        document = cast(Dict[str, Any], document)
        if (version := document.get("openapi", None)) is None:
            if (version := document.get("swagger", None)) is not None:
                raise UnsupportedVersionError(f"swagger version {version} not supported")
            raise UnsupportedVersionError("missing openapi field")

        try:
            v = list(map(int, str(version).split(".")))
        except ValueError:
            raise UnsupportedVersionError(f"invalid openapi version {version}")

        if v[:2] != [3, 0]:
            raise UnsupportedVersionError(f"openapi version {version} not supported")
        return v30.Document.model_validate(document)

    def __init__(self, url: str, document: "JSON") -> None:
        """
        Creates a new OpenAPI object from a loaded description document.

        :param url: the url of the description document
        :param document: The raw OpenAPI document loaded into python
        """
        self._base_url: yarl.URL = yarl.URL(url)

        log.init()
        self.log = logging.getLogger("openapi3doc.OpenAPI")

        self._root = self._parse_obj(document)
        self.log.debug("%s: %d paths", self._base_url, len(self._root.paths))

    @classmethod
    def from_document(cls, url: str, document: v30.Document) -> "OpenAPI":
        r = cls.__new__(cls)
        r._base_url = yarl.URL(url)
        r.log = logging.getLogger("openapi3doc.OpenAPI")
        r._root = document
        return r

    def dumps(self, format: "DocumentFormat" = "json") -> str:
        """
        serialize the description document

        :param format: json or yaml
        :return: the text
        """
        data = self._root.to_dict()
        if format == "yaml":
            return yaml.safe_dump(data, sort_keys=False)
        elif format == "json":
            return json.dumps(data, indent=2)
        raise ValueError(f"unsupported format {format}")
