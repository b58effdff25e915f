"""Host-side resource model.

Field schemas, the resource-state container handed to lifecycle operations,
and the resource object that exposes create/read/delete entry points.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Dict, Optional

LifecycleFunc = Callable[["ResourceData", Any], None]


class FieldType(str, Enum):
    """Declared value type of a resource field."""
    STRING = "string"
    INT = "int"

    def zero(self) -> Any:
        return 0 if self is FieldType.INT else ""

    def coerce(self, value: Any) -> Any:
        """Convert a raw value to this type.

        Raises:
            ValueError: If the value cannot be represented as this type
        """
        if value is None:
            return self.zero()
        if self is FieldType.INT:
            if isinstance(value, bool):
                raise ValueError(f"Expected integer, got {value!r}")
            try:
                return int(value)
            except (TypeError, ValueError):
                raise ValueError(f"Expected integer, got {value!r}") from None
        return str(value)


@dataclass
class FieldSchema:
    """Declaration of a single resource field."""
    type: FieldType = FieldType.STRING
    required: bool = True
    force_new: bool = True

    def copy(self, **changes) -> "FieldSchema":
        return replace(self, **changes)


class ResourceData:
    """State of one resource instance between lifecycle invocations.

    An empty identifier means the resource is absent.
    """

    def __init__(self, schema: Dict[str, FieldSchema], fields: Optional[Dict[str, Any]] = None, id: str = ""):
        self.schema = schema
        self._values: Dict[str, Any] = {}
        self._id = id or ""
        self._removed = False
        for name, value in (fields or {}).items():
            self.set(name, value)

    @property
    def id(self) -> str:
        return self._id

    def set_id(self, value: str) -> None:
        self._id = value or ""
        if self._id:
            self._removed = False

    def mark_absent(self) -> None:
        """Clear the identifier so the host drops the resource from state."""
        self._id = ""
        self._removed = True

    @property
    def removed(self) -> bool:
        return self._removed

    def _field(self, name: str) -> FieldSchema:
        try:
            return self.schema[name]
        except KeyError:
            raise KeyError(f"Unknown field: {name}") from None

    def get(self, name: str) -> Any:
        spec = self._field(name)
        return self._values.get(name, spec.type.zero())

    def set(self, name: str, value: Any) -> None:
        spec = self._field(name)
        self._values[name] = spec.type.coerce(value)

    def to_dict(self) -> Dict[str, Any]:
        state = {name: self.get(name) for name in self.schema}
        state["id"] = self._id
        return state

    def __repr__(self) -> str:
        return f"ResourceData(id={self._id!r}, values={self._values!r})"


@dataclass
class Resource:
    """Resource type with lifecycle entry points invoked by the host."""
    schema: Dict[str, FieldSchema]
    create_func: Optional[LifecycleFunc] = None
    read_func: Optional[LifecycleFunc] = None
    delete_func: Optional[LifecycleFunc] = None
    importable: bool = True

    def new_data(self, fields: Optional[Dict[str, Any]] = None, id: str = "") -> ResourceData:
        return ResourceData(self.schema, fields, id)

    def create(self, data: ResourceData, client: Any) -> None:
        self._call(self.create_func, "create", data, client)

    def read(self, data: ResourceData, client: Any) -> None:
        self._call(self.read_func, "read", data, client)

    def delete(self, data: ResourceData, client: Any) -> None:
        self._call(self.delete_func, "delete", data, client)

    def import_state(self, data: ResourceData, raw_id: str) -> ResourceData:
        """Passthrough import: adopt the identifier as given.

        The host follows up with ``read`` to populate the fields.
        """
        if not self.importable:
            raise NotImplementedError("Resource does not support import")
        data.set_id(raw_id)
        return data

    @staticmethod
    def _call(func: Optional[LifecycleFunc], operation: str, data: ResourceData, client: Any) -> None:
        if func is None:
            raise NotImplementedError(f"Resource does not implement {operation}")
        func(data, client)
