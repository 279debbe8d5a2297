from typing import Any, Dict
import json
import logging

from pydantic import BaseModel, SerializationInfo, SerializerFunctionWrapHandler, model_serializer, model_validator

log = logging.getLogger("openapi3doc.base")

HTTP_METHODS = frozenset(["get", "put", "post", "delete", "options", "head", "patch", "trace"])


def strip_extensions(values, where: str = ""):
    """
    drop `Specification Extensions`_ from a mapping

    extensions are not modelled, values are discarded

    .. _Specification Extensions: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#specification-extensions
    """
    if not isinstance(values, dict):
        return values
    dropped = [k for k in values.keys() if isinstance(k, str) and k.startswith("x-")]
    if not dropped:
        return values
    log.debug("dropping extensions %s %s", where, sorted(dropped))
    return {k: v for k, v in values.items() if k not in dropped}


class FrozenDict(dict):
    """
    a dict which refuses modification once created
    """

    def _readonly(self, *args, **kwargs):
        raise TypeError(f"{type(self).__name__} is read-only")

    __setitem__ = __delitem__ = __ior__ = _readonly
    clear = pop = popitem = setdefault = update = _readonly

    def __reduce__(self):
        return type(self), (dict(self),)


class FrozenList(list):
    """
    a list which refuses modification once created
    """

    def _readonly(self, *args, **kwargs):
        raise TypeError(f"{type(self).__name__} is read-only")

    __setitem__ = __delitem__ = __iadd__ = __imul__ = _readonly
    append = extend = insert = pop = remove = clear = sort = reverse = _readonly

    def __reduce__(self):
        return type(self), (list(self),)


def freeze(value):
    """
    recursively replace dict and list containers by their read-only counterparts
    """
    if isinstance(value, dict):
        return FrozenDict((k, freeze(v)) for k, v in value.items())
    if isinstance(value, list):
        return FrozenList(freeze(v) for v in value)
    return value


class ObjectBase(BaseModel):
    """
    The base class for all schema objects.  Objects are immutable, unknown
    properties are rejected.

    Collections are stored read-only, derive modified objects using :meth:`replace`.
    """

    model_config = dict(arbitrary_types_allowed=False, extra="forbid", frozen=True, populate_by_name=True)

    @model_validator(mode="after")
    def validate_ObjectBase_frozen(self):
        for name, value in list(self.__dict__.items()):
            if isinstance(value, (dict, list)):
                self.__dict__[name] = freeze(value)
        return self

    @model_serializer(mode="wrap")
    def serialize_ObjectBase(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo):
        """
        omit absent fields, keep those given as null
        """
        data = handler(self)
        if not isinstance(data, dict):
            return data
        for name, field in type(self).model_fields.items():
            if name in self.model_fields_set:
                continue
            key = field.alias if (info.by_alias and field.alias) else name
            if key in data and data[key] is None:
                del data[key]
        return data

    def replace(self, **update):
        """
        a copy of the object with the fields in update replaced

        The result is validated like a newly created object, update uses field names.
        A None value removes the field.
        """
        values = {name: getattr(self, name) for name in self.model_fields_set}
        for name, value in update.items():
            if value is None:
                values.pop(name, None)
            else:
                values[name] = value
        return type(self).model_validate(values)

    def model_copy(self, *, update=None, deep: bool = False):
        if update:
            return self.replace(**update)
        return super().model_copy(deep=deep)

    def to_dict(self) -> Dict[str, Any]:
        """
        the JSON shape of the object - aliased names, absent fields omitted
        """
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, **kwargs) -> str:
        return json.dumps(self.to_dict(), **kwargs)


class ObjectExtended(ObjectBase):
    @model_validator(mode="before")
    @classmethod
    def validate_ObjectExtended_extensions(cls, values):
        return strip_extensions(values, cls.__name__)
