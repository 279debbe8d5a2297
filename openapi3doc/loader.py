import abc
import json
import logging
import re
from pathlib import Path
from typing import Optional

import yaml
import httpx
import yarl

from .errors import DocumentLoadError

log = logging.getLogger("openapi3doc.loader")


class YAML12Loader(yaml.SafeLoader):
    """
    A YAML 1.2 (2009) parser is still a problem in python

    OpenAPI uses YAML 1.2
    pyyaml is limited to 1.1

    remove all implicit tags from the SafeLoader
    add the YAML 1.2 core tags

    datetimes are loaded as strings, the description document is json
    which does not know about dates.
    """

    _core_resolvers = [
        ["bool", re.compile(r"""^(?:true|True|TRUE|false|False|FALSE)$""", re.X), list("tTfF")],
        [
            "int",
            re.compile(
                r"""^(?:
                                  0o[0-7]+
                                  |[-+]?(?:[0-9]+)
                                  |0x[0-9a-fA-F]+
                                  )$""",
                re.X,
            ),
            list("-+0123456789"),
        ],
        [
            "float",
            re.compile(
                r"""^(?:[-+]?(?:\.[0-9]+|[0-9]+(\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?
                                  |[-+]?\.(?:inf|Inf|INF)
                                  |\.(?:nan|NaN|NAN))$""",
                re.X,
            ),
            list("-+0123456789."),
        ],
        ["null", re.compile(r"""^(?:~||null|Null|NULL)$""", re.X), ["~", "n", "N", ""]],
    ]
    """
    core tags from
    https://github.com/yaml/pyyaml/pull/700/files
    """

    @classmethod
    def install_core_resolvers(cls):
        # copy, the resolvers of yaml.SafeLoader must not be modified
        cls.yaml_implicit_resolvers = {k: list() for k in cls.yaml_implicit_resolvers.keys()}
        for tag, regex, initial in cls._core_resolvers:
            cls.add_implicit_resolver(f"tag:yaml.org,2002:{tag}", regex, initial)


YAML12Loader.install_core_resolvers()


class Loader(abc.ABC):
    """
    Loaders are used to 'get' description documents:

     * load
     * decode
     * parse
    """

    def __init__(self, yload: type[yaml.SafeLoader] = YAML12Loader):
        self.yload = yload

    @abc.abstractmethod
    def load(self, url: yarl.URL, codec: Optional[str] = None) -> str:
        """
        load and decode description document

        :param url: location of the description document
        :param codec:
        :return: decoded data
        """
        raise NotImplementedError("load")

    @classmethod
    def decode(cls, data: bytes, codec: Optional[str] = None) -> str:
        """
        decode bytes to ascii or utf-8

        :param data:
        :param codec:
        :return:
        """
        if codec is not None:
            codecs = [codec]
        else:
            codecs = ["ascii", "utf-8"]
        for c in codecs:
            try:
                return data.decode(c)
            except UnicodeError:
                continue
        raise DocumentLoadError("<bytes>", f"unable to decode using {codecs}")

    def parse(self, url: yarl.URL, data: str):
        """
        parse the description document as json or yaml

        :param url: location of the description document - the suffix selects the format
        :param data: decoded data of the description document
        :return: the document
        """
        suffix = Path(url.path).suffix
        try:
            if suffix == ".json":
                document = json.loads(data)
            else:
                document = yaml.load(data, Loader=self.yload)
        except (ValueError, yaml.YAMLError) as e:
            raise DocumentLoadError(str(url), f"unable to parse: {e}") from e

        if not isinstance(document, dict):
            raise DocumentLoadError(str(url), f"expected a mapping, got {type(document).__name__}")
        return document

    def get(self, url: yarl.URL):
        """
        load & parse the description document

        :param url: location of the description document
        :return:
        """
        data = self.load(url)
        return self.parse(url, data)

    def __repr__(self):
        return f"{self.__class__.__qualname__}"


class NullLoader(Loader):
    """
    Loader does not load anything
    """

    def load(self, url: yarl.URL, codec: Optional[str] = None) -> str:
        raise NotImplementedError("load")


class WebLoader(Loader):
    """
    Loader downloads data via http/s using the supplied session_factory
    """

    def __init__(self, baseurl: yarl.URL, session_factory=httpx.Client, yload: type[yaml.SafeLoader] = YAML12Loader):
        super().__init__(yload)
        assert isinstance(baseurl, yarl.URL)
        self.baseurl: yarl.URL = baseurl
        self.session_factory = session_factory

    def load(self, url: yarl.URL, codec: Optional[str] = None) -> str:
        url = self.baseurl.join(url)
        log.debug("GET %s", url)
        try:
            with self.session_factory() as session:
                resp = session.get(str(url))
        except httpx.HTTPError as e:
            raise DocumentLoadError(str(url), str(e)) from e
        if not resp.is_success:
            raise DocumentLoadError(str(url), f"unexpected status {resp.status_code}", resp.status_code)
        return self.decode(resp.content, codec)

    def __repr__(self):
        return f"{self.__class__.__qualname__}(baseurl={self.baseurl})"


class FileSystemLoader(Loader):
    """
    Loader to use the local filesystem
    """

    def __init__(self, base: Path, yload: type[yaml.SafeLoader] = YAML12Loader):
        """
        :param base: basedir - lookups are relative to this
        :param yload:
        """
        super().__init__(yload)
        assert isinstance(base, Path)
        self.base = base

    def load(self, url: yarl.URL, codec: Optional[str] = None) -> str:
        assert isinstance(url, yarl.URL)
        path = self.base / Path(url.path)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise DocumentLoadError(str(path), e.strerror or str(e)) from e
        return self.decode(data, codec)

    def __repr__(self):
        return f"{self.__class__.__qualname__}(base={self.base})"


class ChainLoader(Loader):
    """
    Loader to chain different Loaders: succeed or raise trying
    """

    def __init__(self, *loaders: Loader, yload: type[yaml.SafeLoader] = YAML12Loader):
        """

        :param loaders: loaders to use
        :param yload: YAML loader to use
        """
        Loader.__init__(self, yload)
        self.loaders = loaders

    def load(self, url: yarl.URL, codec: Optional[str] = None) -> str:
        log.debug("load %s", url)
        errors = []
        for i in self.loaders:
            try:
                r = i.load(url, codec)
                log.debug("using %s", i)
                return r
            except DocumentLoadError as e:
                errors.append((i, e))
        for l, e in errors:
            log.debug("%s %s", l, e)
        raise DocumentLoadError(str(url), f"not found using {list(self.loaders)}")
