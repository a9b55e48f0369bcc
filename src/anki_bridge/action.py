"""Action contract: binds an action name, protocol version, parameter shape and result shape.

Each AnkiConnect action is a pydantic model class. The model fields are the
parameters, the generic argument is the result shape::

    class AreDue(AnkiAction[list[bool]]):
        ACTION = "areDue"

        cards: list[int]
"""

import functools
import types
import typing
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from anki_bridge.errors import DecodeError

PROTOCOL_VERSION = 6

R = TypeVar("R")

_SCALAR_DEFAULTS: dict[Any, Any] = {bool: False, int: 0, float: 0.0, str: ""}
_CONTAINER_DEFAULTS: dict[Any, Any] = {list: list, dict: dict, tuple: tuple, set: set, frozenset: frozenset}


class WireModel(BaseModel):
    """Base for parameter and result payloads: camelCase on the wire, Python names in code."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnkiAction(WireModel, Generic[R]):
    """Static contract for one AnkiConnect action.

    Subclasses set ``ACTION`` and parametrize the class with their result shape.
    Instances are the call parameters and are immutable.
    """

    model_config = ConfigDict(frozen=True)

    ACTION: ClassVar[str] = ""
    VERSION: ClassVar[int] = PROTOCOL_VERSION

    @classmethod
    def result_type(cls) -> Any:
        """Return the result shape declared as the generic argument."""
        for base in cls.__mro__:
            metadata = getattr(base, "__pydantic_generic_metadata__", None)
            if metadata and metadata["origin"] is AnkiAction and metadata["args"]:
                return metadata["args"][0]
        msg = f"{cls.__name__} does not declare a result type, subclass AnkiAction[<result type>]"
        raise TypeError(msg)

    @classmethod
    def result_adapter(cls) -> TypeAdapter[Any]:
        """Return the validator for the result shape, built once per action class."""
        return _result_adapter(cls)

    @classmethod
    def has_params(cls) -> bool:
        """Return False for parameterless actions, whose envelope omits ``params``."""
        return bool(cls.model_fields)

    @classmethod
    def action_name(cls) -> str:
        """Return the wire action name.

        Raises:
            TypeError: The subclass does not set ``ACTION``.

        """
        if not cls.ACTION:
            msg = f"{cls.__name__} does not define ACTION"
            raise TypeError(msg)
        return cls.ACTION

    def params(self) -> dict[str, Any]:
        """Serialize parameters by wire alias, dropping unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def decode_result(self, raw: Any) -> R:
        """Validate a raw JSON ``result`` into the declared result shape.

        Raises:
            DecodeError: Shape mismatch (code: ``invalid_result``).

        """
        try:
            result: R = self.result_adapter().validate_python(raw)
        except ValidationError as e:
            msg = f"Result of '{self.action_name()}' does not match {_type_name(self.result_type())}: {e}"
            raise DecodeError("invalid_result", msg) from e
        return result

    def default_result(self) -> R:
        """Return the result for a response with neither ``result`` nor ``error``.

        Raises:
            DecodeError: The result shape has no default (code: ``no_default``).

        """
        result: R = default_for(self.result_type())
        return result


@functools.cache
def _result_adapter(action_cls: type[AnkiAction[Any]]) -> TypeAdapter[Any]:
    return TypeAdapter(action_cls.result_type())


def default_for(tp: Any) -> Any:
    """Return the empty value of a result shape.

    Raises:
        DecodeError: The shape has no meaningful default (code: ``no_default``).

    """
    if tp is None or tp is type(None) or tp is Any:
        return None
    origin = typing.get_origin(tp)
    if origin is typing.Union or origin is types.UnionType:
        args = typing.get_args(tp)
        if type(None) in args:
            return None
        # first member wins, so int | Literal[False] reads as 0
        return default_for(args[0])
    if origin is typing.Literal:
        return typing.get_args(tp)[0]
    if origin is typing.Annotated:
        return default_for(typing.get_args(tp)[0])
    container = _CONTAINER_DEFAULTS.get(origin or tp)
    if container is not None:
        return container()
    if tp in _SCALAR_DEFAULTS:
        return _SCALAR_DEFAULTS[tp]
    if isinstance(tp, type) and issubclass(tp, BaseModel):
        try:
            return tp()
        except ValidationError:
            msg = f"No default for {tp.__name__}: it has required fields"
            raise DecodeError("no_default", msg) from None
    msg = f"No default for {_type_name(tp)}"
    raise DecodeError("no_default", msg)


def _type_name(tp: Any) -> str:
    if typing.get_origin(tp) is not None:
        return repr(tp)
    return getattr(tp, "__name__", None) or repr(tp)
