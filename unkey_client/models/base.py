"""
Model Base Classes

Requests are frozen, camelCase on the wire, and drop any tri-state field
still in the Undefined state before serialization. Responses ignore fields
this client does not know about.
"""

from typing import Any, Dict, Optional, Set, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..undefined import UndefinedOr

IncEx = Union[Set[str], Dict[str, Any]]


class WireModel(BaseModel):
    """Shared camelCase alias configuration."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ResponseModel(WireModel):
    model_config = ConfigDict(extra="ignore")


class RequestModel(WireModel):
    """
    Base for request payloads.

    Setters on subclasses return updated copies, so a request can be built
    up in any order and is never mutated once passed to an operation.
    """

    model_config = ConfigDict(extra="forbid")

    def omitted_fields(self) -> Set[str]:
        """
        Fields left off the wire.

        That is every tri-state field still Undefined, plus plain optional
        fields that were never set. Tri-state Null is kept and sent as null.
        """
        return {
            name
            for name, value in self.__dict__.items()
            if value is None or (isinstance(value, UndefinedOr) and value.is_undefined())
        }

    def _merge_exclude(self, exclude: Optional[IncEx]) -> Optional[IncEx]:
        omitted = self.omitted_fields()
        if not omitted:
            return exclude
        if exclude is None:
            return omitted
        if isinstance(exclude, dict):
            merged = dict(exclude)
            merged.update({name: True for name in omitted})
            return merged
        return set(exclude) | omitted

    def model_dump(self, *, exclude: Optional[IncEx] = None, **kwargs: Any) -> Dict[str, Any]:
        return super().model_dump(exclude=self._merge_exclude(exclude), **kwargs)

    def model_dump_json(self, *, exclude: Optional[IncEx] = None, **kwargs: Any) -> str:
        return super().model_dump_json(exclude=self._merge_exclude(exclude), **kwargs)

    def to_wire(self) -> Dict[str, Any]:
        """JSON-ready body with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)

    def _set(self, **update: Any):
        # Re-validate so setters get the same checks as the constructor.
        return type(self)(**{**dict(self), **update})
