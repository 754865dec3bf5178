"""
Tri-State Fields

UndefinedOr distinguishes a value that is absent from the wire (Undefined),
explicitly cleared (Null) and set (Value). Partial update requests rely on
this to tell "leave unchanged" apart from "clear".
"""

from typing import Any, Callable, Generic, Optional, TypeVar, get_args

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .exceptions import UndefinedSerializationError

T = TypeVar("T")

_VALUE = "value"
_NULL = "null"
_UNDEFINED = "undefined"


class UndefinedOr(Generic[T]):
    """
    A value that may be present, null, or not present at all.

    Instances are immutable. Build them through the class constructors:

        UndefinedOr.value(10)
        UndefinedOr.null()
        UndefinedOr.undefined()

    Undefined is the default state of every tri-state request field and
    must be skipped by the enclosing model before serialization; calling
    serialize() on it raises UndefinedSerializationError.
    """

    __slots__ = ("_state", "_value")

    def __init__(self, state: str, value: Optional[T] = None):
        if state not in (_VALUE, _NULL, _UNDEFINED):
            raise ValueError(f"Unknown UndefinedOr state: {state}")
        object.__setattr__(self, "_state", state)
        object.__setattr__(self, "_value", value if state == _VALUE else None)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("UndefinedOr is immutable")

    @classmethod
    def value(cls, value: T) -> "UndefinedOr[T]":
        return cls(_VALUE, value)

    @classmethod
    def null(cls) -> "UndefinedOr[T]":
        return NULL

    @classmethod
    def undefined(cls) -> "UndefinedOr[T]":
        return UNDEFINED

    @classmethod
    def from_optional(cls, value: Optional[T]) -> "UndefinedOr[T]":
        """
        Convert an ordinary optional value.

        None maps to Null and anything else maps to Value. There is no
        path from an optional into Undefined.
        """
        if value is None:
            return NULL
        return cls(_VALUE, value)

    def is_some(self) -> bool:
        """True if this holds a value."""
        return self._state == _VALUE

    def is_null(self) -> bool:
        return self._state == _NULL

    def is_undefined(self) -> bool:
        return self._state == _UNDEFINED

    def inner(self) -> Optional[T]:
        """The held value for the Value state, None otherwise."""
        return self._value if self._state == _VALUE else None

    def serialize(self) -> Optional[T]:
        """
        Produce the wire representation.

        Returns:
            The held value, or None for Null

        Raises:
            UndefinedSerializationError: If the field is Undefined
        """
        if self._state == _VALUE:
            return self._value
        if self._state == _NULL:
            return None
        raise UndefinedSerializationError("Undefined should never be serialized.")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UndefinedOr):
            return NotImplemented
        return self._state == other._state and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._state, self._value))

    def __reduce__(self):
        return (UndefinedOr, (self._state, self._value))

    def __repr__(self) -> str:
        if self._state == _VALUE:
            return f"UndefinedOr.value({self._value!r})"
        return f"UndefinedOr.{self._state}()"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        args = get_args(source_type)
        inner_schema = handler.generate_schema(args[0]) if args else core_schema.any_schema()
        nullable_inner = core_schema.nullable_schema(inner_schema)

        from_raw = core_schema.no_info_after_validator_function(
            cls.from_optional, nullable_inner
        )

        return core_schema.union_schema(
            [core_schema.is_instance_schema(cls), from_raw],
            serialization=core_schema.wrap_serializer_function_ser_schema(
                _serialize_field, schema=nullable_inner
            ),
        )


def _serialize_field(field: UndefinedOr[Any], handler: Callable[[Any], Any]) -> Any:
    return handler(field.serialize())


NULL: UndefinedOr[Any] = UndefinedOr(_NULL)
UNDEFINED: UndefinedOr[Any] = UndefinedOr(_UNDEFINED)
