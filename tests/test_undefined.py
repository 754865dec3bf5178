import copy

import pytest
from pydantic_core import PydanticSerializationError

from unkey_client import NULL, UNDEFINED, UndefinedOr, UndefinedSerializationError
from unkey_client.models import Ratelimit, RatelimitType, RequestModel


class Container(RequestModel):
    a: UndefinedOr[int] = UNDEFINED
    b: UndefinedOr[int] = UNDEFINED
    c: UndefinedOr[int] = UNDEFINED
    d: UndefinedOr[int] = UNDEFINED


class TestUndefinedOrStates:

    def test_value_state(self):
        val = UndefinedOr.value(0)
        assert val.is_some() is True
        assert val.is_null() is False
        assert val.is_undefined() is False
        assert val.inner() == 0

    def test_null_state(self):
        val = UndefinedOr.null()
        assert val.is_null() is True
        assert val.is_some() is False
        assert val.inner() is None

    def test_undefined_state(self):
        val = UndefinedOr.undefined()
        assert val.is_undefined() is True
        assert val.is_some() is False
        assert val.inner() is None

    def test_equality(self):
        assert UndefinedOr.value(420) == UndefinedOr.value(420)
        assert UndefinedOr.value(420) != UndefinedOr.value(69)
        assert UndefinedOr.null() == NULL
        assert UndefinedOr.undefined() == UNDEFINED
        assert NULL != UNDEFINED

    def test_immutable(self):
        val = UndefinedOr.value(1)
        with pytest.raises(AttributeError):
            val._value = 2

    def test_copy_preserves_state(self):
        val = UndefinedOr.value({"a": [1]})
        clone = copy.deepcopy(val)
        assert clone == val
        assert clone.inner() is not val.inner()
        assert copy.copy(UNDEFINED).is_undefined()


class TestFromOptional:

    def test_from_value(self):
        assert UndefinedOr.from_optional(69) == UndefinedOr.value(69)

    def test_from_none(self):
        assert UndefinedOr.from_optional(None) == NULL

    def test_falsy_values_are_values(self):
        for falsy in (0, "", False, []):
            assert UndefinedOr.from_optional(falsy).is_some()

    def test_never_undefined(self):
        for opt in (None, 0, "x"):
            assert not UndefinedOr.from_optional(opt).is_undefined()


class TestSerialization:

    def test_serialize_value(self):
        assert UndefinedOr.value(5).serialize() == 5

    def test_serialize_null(self):
        assert NULL.serialize() is None

    def test_serialize_undefined_fails(self):
        with pytest.raises(UndefinedSerializationError):
            UNDEFINED.serialize()

    def test_serialize_all_null(self):
        t = Container(a=NULL, b=NULL, c=NULL, d=NULL)
        assert t.model_dump_json() == '{"a":null,"b":null,"c":null,"d":null}'

    def test_serialize_all_undefined(self):
        assert Container().model_dump_json() == "{}"

    def test_serialize_values(self):
        t = Container(
            a=UndefinedOr.value(69),
            b=UndefinedOr.value(420),
            c=UndefinedOr.value(42),
            d=UndefinedOr.value(0),
        )
        assert t.model_dump_json() == '{"a":69,"b":420,"c":42,"d":0}'

    def test_serialize_mixed(self):
        t = Container(
            a=UndefinedOr.value(69),
            b=UndefinedOr.value(420),
            c=NULL,
            d=UNDEFINED,
        )
        assert t.model_dump_json() == '{"a":69,"b":420,"c":null}'
        assert t.model_dump() == {"a": 69, "b": 420, "c": None}

    def test_raw_values_are_wrapped(self):
        t = Container(a=1, b=None)
        assert t.a == UndefinedOr.value(1)
        assert t.b == NULL
        assert t.c == UNDEFINED

    def test_nested_model_uses_aliases(self):
        class WithRatelimit(RequestModel):
            ratelimit: UndefinedOr[Ratelimit] = UNDEFINED

        ratelimit = Ratelimit(
            ratelimit_type=RatelimitType.FAST,
            refill_rate=1,
            refill_interval=1000,
            limit=10,
        )
        body = WithRatelimit(ratelimit=UndefinedOr.value(ratelimit)).to_wire()
        assert body == {
            "ratelimit": {
                "type": "fast",
                "refillRate": 1,
                "refillInterval": 1000,
                "limit": 10,
            }
        }

    def test_undefined_without_omission_fails_loudly(self):
        t = Container(a=UndefinedOr.value(1))
        # Bypass the container-level omission and hit the field serializer.
        with pytest.raises((UndefinedSerializationError, PydanticSerializationError)):
            super(RequestModel, t).model_dump_json()

    def test_caller_exclude_is_merged(self):
        t = Container(a=UndefinedOr.value(1), b=NULL)
        assert t.model_dump(exclude={"b"}) == {"a": 1}
