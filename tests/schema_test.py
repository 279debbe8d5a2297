import pytest
from pydantic import ValidationError

from openapi3doc import v30
from openapi3doc.v30 import InstanceType, Schema, Reference


def test_instance_types():
    assert [i.value for i in InstanceType] == ["object", "array", "string", "number", "boolean", "null"]
    for i in InstanceType:
        assert Schema(type=i.value).type is i


def test_type_required():
    with pytest.raises(ValidationError):
        Schema()
    with pytest.raises(ValidationError):
        Schema.model_validate({"type": "integer"})


def test_minimal_schema_serialization():
    s = Schema(type="string")
    assert s.to_dict() == {"type": "string"}
    assert Schema.model_validate(s.to_dict()) == s


def test_aliases():
    s = Schema.model_validate({"type": "object", "not": {"type": "null"}})
    assert s.not_ == Schema(type="null")
    assert s.to_dict() == {"type": "object", "not": {"type": "null"}}


def test_recursive_schema():
    data = {
        "type": "object",
        "required": ["children"],
        "properties": {
            "children": {"type": "array", "items": {"$ref": "#/components/schemas/Node"}},
            "parent": {"$ref": "#/components/schemas/Node"},
            "meta": {"type": "object", "additionalProperties": {"type": "string"}},
        },
    }
    s = Schema.model_validate(data)
    assert isinstance(s.properties["children"].items, Reference)
    assert isinstance(s.properties["parent"], Reference)
    assert s.properties["meta"].additionalProperties == Schema(type="string")
    assert s.to_dict() == data


@pytest.mark.parametrize(
    "value, expected",
    [(True, bool), (False, bool), ({"type": "string"}, Schema), ({"$ref": "#/components/schemas/A"}, Reference)],
)
def test_additionalProperties(value, expected):
    s = Schema.model_validate({"type": "object", "additionalProperties": value})
    assert isinstance(s.additionalProperties, expected)
    assert s.to_dict()["additionalProperties"] == value


def test_items_not_restricted_by_type():
    s = Schema(type="string", items=Schema(type="string"), properties={"a": Schema(type="number")})
    assert s.items is not None


def test_composition_non_empty():
    s = Schema.model_validate({"type": "object", "oneOf": [{"$ref": "#/a"}, {"type": "string"}]})
    assert isinstance(s.oneOf[0], Reference)
    with pytest.raises(ValidationError):
        Schema.model_validate({"type": "object", "allOf": []})


def test_numbers():
    s = Schema.model_validate({"type": "number", "minimum": 1, "maximum": 2.5, "multipleOf": 0.5})
    assert isinstance(s.minimum, int)
    assert isinstance(s.maximum, float)
    assert s.to_dict() == {"type": "number", "minimum": 1, "maximum": 2.5, "multipleOf": 0.5}


def test_unknown_field():
    with pytest.raises(ValidationError):
        Schema.model_validate({"type": "object", "additionalItems": False})


def test_extensions_dropped():
    s = Schema.model_validate({"type": "string", "x-nullable": True})
    assert s.to_dict() == {"type": "string"}


def test_discriminator_xml():
    s = Schema.model_validate(
        {
            "type": "object",
            "discriminator": {"propertyName": "petType", "mapping": {"dog": "#/components/schemas/Dog"}},
            "xml": {"name": "animal", "wrapped": True},
            "externalDocs": {"url": "https://example.com"},
        }
    )
    assert s.discriminator == v30.Discriminator(propertyName="petType", mapping={"dog": "#/components/schemas/Dog"})
    assert s.xml.wrapped is True
    assert s.xml.attribute is None
    assert s.externalDocs.url == "https://example.com"
    with pytest.raises(ValidationError):
        v30.Discriminator()


def test_frozen():
    s = Schema(type="string")
    with pytest.raises(ValidationError):
        s.title = "changed"
    t = s.model_copy(update={"title": "changed"})
    assert s.title is None
    assert t.title == "changed"


def test_replace():
    s = Schema(type="object", required=["id"])
    t = s.replace(title="pet", required=["id", "name"])
    assert (t.title, t.required) == ("pet", ["id", "name"])
    assert s.required == ["id"]
    assert t.replace(title=None).to_dict() == {"type": "object", "required": ["id", "name"]}
    with pytest.raises(ValidationError):
        s.replace(type="integer")


def test_explicit_null_kept():
    data = {"type": "string", "nullable": True, "default": None, "example": None}
    s = Schema.model_validate(data)
    assert s.to_dict() == data
    assert Schema.model_validate(s.to_dict()) == s
    assert Schema(type="string", nullable=True).to_dict() == {"type": "string", "nullable": True}


def test_collections_readonly():
    s = Schema.model_validate({"type": "object", "required": ["id"], "properties": {"id": {"type": "number"}}})
    with pytest.raises(TypeError):
        s.required.append("name")
    with pytest.raises(TypeError):
        s.properties["name"] = Schema(type="string")
    with pytest.raises(TypeError):
        del s.properties["id"]
    assert s.to_dict() == {"type": "object", "required": ["id"], "properties": {"id": {"type": "number"}}}
