from pathlib import Path

import yaml
import pytest

from openapi3doc import v30
from openapi3doc.loader import YAML12Loader

LOADED_FILES = {}
URLBASE = "/"
FIXTURES = Path(__file__).parent / "fixtures"


def _get_parsed_yaml(filename):
    """
    Returns a python dict that is a parsed yaml file from the tests/fixtures
    directory.

    :param filename: The filename to load.  Must exist in tests/fixtures and
                     include extension.
    :type filename: str
    """
    if filename not in LOADED_FILES:
        raw = (FIXTURES / filename).read_text()
        LOADED_FILES[filename] = raw

    return yaml.load(LOADED_FILES[filename], Loader=YAML12Loader)


@pytest.fixture
def fixtures():
    return FIXTURES


@pytest.fixture
def petstore():
    """
    Provides the petstore.yaml description document
    """
    yield _get_parsed_yaml("petstore.yaml")


@pytest.fixture
def minimal():
    """
    the smallest valid description document
    """
    yield {"openapi": "3.0.3", "info": {"title": "minimal", "version": "1"}, "paths": {}}


@pytest.fixture
def document():
    """
    a Document assembled from model objects
    """
    pet = v30.Schema(
        type="object",
        required=["name"],
        properties={"name": v30.Schema(type="string"), "tag": v30.Reference(ref="#/components/schemas/Tag")},
    )
    op = v30.Operation(
        operationId="listPets",
        parameters=[
            v30.Parameter(name="limit", in_="query", schema=v30.Schema(type="number", maximum=100)),
            v30.Reference(ref="#/components/parameters/Offset"),
        ],
        responses={
            "200": v30.Response(
                description="a list of pets",
                content={"application/json": v30.MediaType(schema=v30.Schema(type="array", items=pet))},
            ),
            "default": v30.Reference(ref="#/components/responses/Error"),
        },
    )
    yield v30.Document(
        openapi="3.0.3",
        info=v30.Info(title="pets", version="1.0.0", license=v30.License(name="MIT")),
        servers=[v30.Server(url="https://example.com/v1")],
        paths={"/pets": v30.PathItem(get=op)},
        components=v30.Components(
            schemas={"Pet": pet, "Tag": v30.Schema(type="string")},
            securitySchemes={"key": v30.ApiKey(name="X-Key", in_="header")},
        ),
        security=[v30.SecurityRequirement({"key": []})],
        tags=[v30.Tag(name="pets"), v30.Tag(name="pets")],
    )
