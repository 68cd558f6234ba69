"""Schema introspection for pydantic models.

Maps each model field to the wire kind used to write and read it. The kind
is the name of the Encoder/Decoder method that handles the field.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Type, Union, get_args, get_origin

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from ..exceptions import SchemaError
from .numeric import LAYOUTS, FixedWidth

INTEGER_KINDS = ("uint8", "uint16", "uint32", "uint64", "int8", "int16", "int32", "int64", "size")
FLOAT_KINDS = ("float32", "float64")
WIRE_KINDS = INTEGER_KINDS + FLOAT_KINDS + ("bool", "bytes", "string")

# Wire kinds used when a field does not name one
DEFAULT_KINDS: dict[type, str] = {
    bool: "bool",
    float: "float64",
    str: "string",
    bytes: "bytes",
}

COMPATIBLE_KINDS: dict[type, tuple[str, ...]] = {
    bool: ("bool",),
    int: INTEGER_KINDS,
    float: FLOAT_KINDS,
    str: ("string",),
    bytes: ("bytes",),
}


@dataclass(frozen=True)
class FieldSchema:
    """Schema information for a single field.

    Attributes:
        name: Field name
        python_type: Python type annotation
        kind: Wire kind (Encoder/Decoder method name)
    """

    name: str
    python_type: Type[Any]
    kind: str

    @property
    def layout(self) -> Optional[FixedWidth]:
        """Fixed-width layout, or None for variable-width kinds."""
        return LAYOUTS.get(self.kind)


class MessageSchema:
    """Ordered wire kinds for every field of a pydantic model.

    Example:
        >>> schema = MessageSchema.from_model(Status)
        >>> [(field.name, field.kind) for field in schema.fields]
        [('vehicle_id', 'uint8'), ('name', 'string'), ('active', 'bool')]
    """

    def __init__(self, model_class: Type[BaseModel]) -> None:
        self.model_class = model_class
        self.fields: List[FieldSchema] = []
        self._introspect()

    @classmethod
    def from_model(cls, model_class: Type[BaseModel]) -> MessageSchema:
        return cls(model_class)

    def _introspect(self) -> None:
        for field_name, field_info in self.model_class.model_fields.items():
            self.fields.append(self._extract_field_schema(field_name, field_info))

    def _extract_field_schema(self, name: str, field_info: FieldInfo) -> FieldSchema:
        annotation = field_info.annotation
        if annotation is None:
            raise SchemaError(f"Field {name} has no type annotation")

        if get_origin(annotation) is Union or type(None) in get_args(annotation):
            # There is no presence flag on the wire
            raise SchemaError(f"Field {name}: optional and union types are not supported")

        extra = field_info.json_schema_extra
        kind = extra.get("wire") if isinstance(extra, dict) else None

        if kind is None:
            if annotation is int:
                raise SchemaError(
                    f"Field {name}: integer fields need an explicit wire kind, "
                    f"e.g. WireField('uint16') or the UInt16 alias"
                )
            kind = DEFAULT_KINDS.get(annotation)
            if kind is None:
                raise SchemaError(
                    f"Field {name}: unsupported type {annotation}. "
                    f"Supported: bool, int, float, str, bytes."
                )

        if kind not in WIRE_KINDS:
            raise SchemaError(f"Field {name}: unknown wire kind {kind!r}")

        if kind not in COMPATIBLE_KINDS.get(annotation, ()):
            raise SchemaError(f"Field {name}: wire kind {kind!r} cannot carry {annotation}")

        return FieldSchema(name=name, python_type=annotation, kind=str(kind))

    def fixed_size(self) -> Optional[int]:
        """Encoded size in bytes when every field has a fixed width, else None.

        Booleans are variable here since adjacent ones share a byte.
        """
        total = 0
        for field in self.fields:
            if field.layout is None:
                return None
            total += field.layout.size
        return total
