"""Tests for the AnkiAction contract: identity, params serialization, result decoding and defaults."""

from typing import Literal

import pytest
from pydantic import ValidationError

from anki_bridge.action import PROTOCOL_VERSION, AnkiAction, WireModel, default_for
from anki_bridge.errors import DecodeError


class Point(WireModel):
    pos_x: int
    pos_y: int


class Counter(WireModel):
    total_count: int = 0


class ListInts(AnkiAction[list[int]]):
    ACTION = "listInts"


class IntOrText(AnkiAction[int | str]):
    ACTION = "intOrText"


class Unit(AnkiAction[None]):
    ACTION = "unit"

    card: int


class MovePoint(AnkiAction[Point]):
    ACTION = "movePoint"

    point: Point
    label: str | None = None


class Nameless(AnkiAction[int]):
    pass


class Untyped(AnkiAction):  # type: ignore[type-arg]
    ACTION = "untyped"


class TestIdentity:
    """Action name, version and result type."""

    def test_action_name(self):
        """action_name() returns ACTION."""
        assert MovePoint.action_name() == "movePoint"

    def test_default_version(self):
        """Every action defaults to protocol version 6."""
        assert ListInts.VERSION == PROTOCOL_VERSION == 6

    def test_result_type(self):
        """Result type is the generic argument."""
        assert ListInts.result_type() == list[int]
        assert MovePoint.result_type() is Point

    def test_missing_action_name(self):
        """An action without ACTION is a programming error."""
        with pytest.raises(TypeError):
            Nameless.action_name()

    def test_missing_result_type(self):
        """An action not parametrized with a result type is a programming error."""
        with pytest.raises(TypeError):
            Untyped.result_type()

    def test_has_params(self):
        """Actions without fields have no params."""
        assert ListInts.has_params() is False
        assert MovePoint.has_params() is True

    def test_frozen(self):
        """Action values cannot be mutated."""
        action = Unit(card=1)
        with pytest.raises(ValidationError):
            action.card = 2  # type: ignore[misc]


class TestParams:
    """params() wire serialization."""

    def test_camel_case_aliases(self):
        """Nested snake_case names are sent in camelCase."""
        action = MovePoint(point=Point(pos_x=1, pos_y=2))
        assert action.params() == {"point": {"posX": 1, "posY": 2}}

    def test_unset_optional_dropped(self):
        """None-valued optional fields are not sent."""
        assert "label" not in MovePoint(point=Point(pos_x=0, pos_y=0)).params()

    def test_set_optional_sent(self):
        """Optional fields with a value are sent."""
        assert MovePoint(point=Point(pos_x=0, pos_y=0), label="a").params()["label"] == "a"

    def test_populate_by_alias(self):
        """Values can be built from wire names as well as Python names."""
        assert Point.model_validate({"posX": 3, "posY": 4}) == Point(pos_x=3, pos_y=4)


class TestDecodeResult:
    """decode_result() validation."""

    def test_list(self):
        """A matching list decodes as-is."""
        assert ListInts().decode_result([1, 2, 3]) == [1, 2, 3]

    def test_model(self):
        """A JSON object decodes into the result model."""
        assert MovePoint(point=Point(pos_x=0, pos_y=0)).decode_result({"posX": 5, "posY": 6}) == Point(pos_x=5, pos_y=6)

    def test_missing_field(self):
        """A missing required field is an invalid_result error."""
        with pytest.raises(DecodeError) as exc_info:
            MovePoint(point=Point(pos_x=0, pos_y=0)).decode_result({"posX": 5})
        assert exc_info.value.code == "invalid_result"

    def test_wrong_type(self):
        """A wrong JSON type is an invalid_result error."""
        with pytest.raises(DecodeError) as exc_info:
            ListInts().decode_result({"a": 1})
        assert exc_info.value.code == "invalid_result"

    def test_unit_rejects_value(self):
        """A unit action does not accept a non-null result."""
        with pytest.raises(DecodeError):
            Unit(card=1).decode_result(True)

    def test_message_names_union_shape(self):
        """The error message spells out a union result shape."""
        with pytest.raises(DecodeError, match=r"does not match int \| str"):
            IntOrText().decode_result([1])

    def test_message_names_generic_shape(self):
        """The error message keeps the type arguments of a generic result shape."""
        with pytest.raises(DecodeError, match=r"does not match list\[int\]"):
            ListInts().decode_result({"a": 1})


class TestDefaults:
    """default_result() / default_for() for the no-result, no-error case."""

    def test_unit(self):
        """Unit result defaults to None."""
        assert Unit(card=1).default_result() is None

    def test_list(self):
        """List result defaults to an empty list."""
        assert ListInts().default_result() == []

    @pytest.mark.parametrize(
        ("tp", "expected"),
        [
            (dict[str, int], {}),
            (bool, False),
            (int, 0),
            (float, 0.0),
            (str, ""),
            (list[bool | None], []),
            (Point | None, None),
            (Literal[True], True),
            (Counter, Counter(total_count=0)),
        ],
    )
    def test_default_for(self, tp, expected):
        """Each supported shape has its empty value."""
        assert default_for(tp) == expected

    def test_model_with_required_fields(self):
        """A model with required fields has no default."""
        with pytest.raises(DecodeError) as exc_info:
            MovePoint(point=Point(pos_x=0, pos_y=0)).default_result()
        assert exc_info.value.code == "no_default"

    def test_union_without_none(self):
        """A union without None defaults to its first member."""
        assert default_for(int | str) == 0
        assert default_for(int | Literal[False]) == 0
