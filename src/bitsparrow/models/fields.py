"""Field helpers and type aliases.

Integer fields must name their wire kind, since ``int`` alone does not say
how many bytes to spend. The aliases below attach the kind and the matching
range constraints in one go.
"""

from __future__ import annotations

from typing import Annotated, Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo

from ..codec.numeric import LAYOUTS
from ..codec.schema import WIRE_KINDS
from ..config import MAX_SAFE_INTEGER
from ..exceptions import SchemaError


def WireField(kind: str, **kwargs: Any) -> FieldInfo:
    """Create a field written with the given wire kind.

    Integer kinds get ``ge``/``le`` bounds matching their width unless the
    caller passes tighter ones.

    Args:
        kind: Wire kind (``uint8`` ... ``float64``, ``size``, ``bool``, ``bytes``, ``string``)
        **kwargs: Additional Field() arguments (default, description, ...)

    Returns:
        Pydantic FieldInfo suitable for use as a field default or Annotated metadata.

    Example:
        >>> class Reading(BaseMessage):
        ...     sensor: int = WireField("uint16")
        ...     offset: Annotated[int, WireField("int8", ge=-10, le=10)]
    """
    if kind not in WIRE_KINDS:
        raise SchemaError(f"Unknown wire kind {kind!r}; expected one of {', '.join(WIRE_KINDS)}")

    layout = LAYOUTS.get(kind)
    if layout is not None and not layout.is_float:
        kwargs.setdefault("ge", layout.min_value)
        kwargs.setdefault("le", layout.max_value)
    elif kind == "size":
        kwargs.setdefault("ge", 0)
        kwargs.setdefault("le", MAX_SAFE_INTEGER)

    extra = dict(kwargs.pop("json_schema_extra", None) or {})
    extra["wire"] = kind
    return cast(FieldInfo, Field(json_schema_extra=extra, **kwargs))


UInt8 = Annotated[int, WireField("uint8")]
UInt16 = Annotated[int, WireField("uint16")]
UInt32 = Annotated[int, WireField("uint32")]
UInt64 = Annotated[int, WireField("uint64")]
Int8 = Annotated[int, WireField("int8")]
Int16 = Annotated[int, WireField("int16")]
Int32 = Annotated[int, WireField("int32")]
Int64 = Annotated[int, WireField("int64")]
Size = Annotated[int, WireField("size")]
Float32 = Annotated[float, WireField("float32")]
Float64 = Annotated[float, WireField("float64")]
