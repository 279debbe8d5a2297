import pytest
from pydantic import TypeAdapter, ValidationError

from openapi3doc import v30
from openapi3doc.v30 import Response, Link, Callback, Operation, PathItem, RequestBody, Reference


def test_response_description_only():
    r = Response(description="no content")
    d = r.to_dict()
    assert d == {"description": "no content"}
    assert "content" not in d
    assert "headers" not in d
    assert Response.model_validate(d) == r


def test_response_description_required():
    with pytest.raises(ValidationError):
        Response.model_validate({"content": {}})


def test_response_headers_links():
    r = Response.model_validate(
        {
            "description": "ok",
            "headers": {"X-Rate-Limit": {"schema": {"type": "number"}}, "X-Other": {"$ref": "#/h"}},
            "links": {"self": {"operationId": "getPet", "parameters": {"id": "$response.body#/id"}}},
        }
    )
    assert isinstance(r.headers["X-Rate-Limit"], v30.Header)
    assert isinstance(r.headers["X-Other"], Reference)
    assert r.links["self"].parameters == {"id": "$response.body#/id"}


def test_link_operation_exclusive():
    with pytest.raises(ValidationError, match="mutually exclusive"):
        Link(operationRef="#/paths/~1pets/get", operationId="listPets")
    assert Link(operationRef="#/paths/~1pets/get").operationId is None
    assert Link().to_dict() == {}


def test_link_server():
    link = Link.model_validate({"operationId": "a", "requestBody": {"id": 1}, "server": {"url": "https://b"}})
    assert link.server.url == "https://b"
    assert link.requestBody == {"id": 1}


def test_request_body():
    with pytest.raises(ValidationError):
        RequestBody.model_validate({"description": "no content"})
    rb = RequestBody.model_validate({"content": {"text/plain": {}}, "required": True})
    assert rb.to_dict() == {"content": {"text/plain": {}}, "required": True}


def test_operation_responses():
    op = Operation.model_validate(
        {
            "operationId": "getPet",
            "responses": {200: {"description": "ok"}, "4XX": {"$ref": "#/r"}, "default": {"description": "e"}},
        }
    )
    assert list(op.responses.keys()) == ["200", "4XX", "default"]
    assert isinstance(op.responses["4XX"], Reference)
    assert op.to_dict()["responses"]["200"] == {"description": "ok"}


def test_operation_required():
    with pytest.raises(ValidationError):
        Operation.model_validate({"responses": {}})
    with pytest.raises(ValidationError):
        Operation.model_validate({"operationId": "a"})
    assert Operation(operationId="a", responses={}).responses == {}


def test_responses_extensions():
    op = Operation.model_validate({"operationId": "a", "responses": {"200": {"description": "ok"}, "x-ignored": 1}})
    assert list(op.responses.keys()) == ["200"]


def test_callback():
    cb = TypeAdapter(v30.CallbackOrReference).validate_python(
        {
            "{$request.body#/callbackUrl}": {
                "post": {"operationId": "cb", "responses": {"200": {"description": "ok"}}},
            },
            "x-internal": True,
        }
    )
    assert isinstance(cb, Callback)
    assert len(cb) == 1
    assert cb["{$request.body#/callbackUrl}"].post.operationId == "cb"
    assert list(cb) == ["{$request.body#/callbackUrl}"]
    assert cb.to_dict() == {
        "{$request.body#/callbackUrl}": {"post": {"operationId": "cb", "responses": {"200": {"description": "ok"}}}}
    }

    ref = TypeAdapter(v30.CallbackOrReference).validate_python({"$ref": "#/components/callbacks/a"})
    assert isinstance(ref, Reference)


def test_path_item():
    pi = PathItem.model_validate(
        {
            "summary": "pets",
            "delete": {"operationId": "d", "responses": {}},
            "get": {"operationId": "g", "responses": {}},
            "parameters": [{"$ref": "#/components/parameters/Id"}, {"name": "id", "in": "path", "required": True}],
        }
    )
    assert [m for m, _ in pi.operations()] == ["get", "delete"]
    assert isinstance(pi.parameters[0], Reference)
    assert isinstance(pi.parameters[1], v30.Parameter)


def test_path_item_ref():
    pi = PathItem.model_validate({"$ref": "https://example.com/paths.yaml#/pets"})
    assert pi.ref == "https://example.com/paths.yaml#/pets"
    assert pi.to_dict() == {"$ref": "https://example.com/paths.yaml#/pets"}


def test_server_url():
    server = v30.Server.model_validate(
        {
            "url": "https://{env}.example.com:{port}/v1",
            "variables": {"env": {"default": "api", "enum": ["api", "staging"]}, "port": {"default": "443"}},
        }
    )
    assert server.url_for() == "https://api.example.com:443/v1"
    assert server.url_for({"env": "staging", "port": "8443"}) == "https://staging.example.com:8443/v1"
    with pytest.raises(ValueError, match="not allowed"):
        server.url_for({"env": "prod"})

    with pytest.raises(ValueError, match="Missing Server Variable"):
        v30.Server(url="https://{env}.example.com").url_for()


def test_server_variable():
    with pytest.raises(ValidationError):
        v30.ServerVariable.model_validate({"enum": ["a"]})
    with pytest.raises(ValidationError):
        v30.ServerVariable.model_validate({"default": "a", "enum": []})
