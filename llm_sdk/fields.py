"""
Wire mapping shared by request and response models

Field names on the models are the wire names. Encoding drops fields whose
value is None unless the model lists it in ``keep_when_none``, and drops
empty sequences for the fields a model lists in ``omit_when_empty``.
Decoding ignores fields the models do not declare.
"""

from enum import Enum
from typing import Any, ClassVar, Dict, Mapping, Tuple, Type, TypeVar, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    ValidationError,
    model_serializer,
)

from .exceptions import DecodeError, DecodeErrorKind

M = TypeVar("M", bound="WireModel")


class _Unset:
    """Marker for a builder field that was never assigned"""

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


class WireEnum(str, Enum):
    """Enum serialized as the lower-snake-case member name unless given an explicit wire string"""

    @staticmethod
    def _generate_next_value_(name, start, count, last_values):
        return name.lower()

    def __str__(self) -> str:
        return self.value


class WireModel(BaseModel):
    """Immutable model with the omission rules of the chat completion wire schema"""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    omit_when_empty: ClassVar[Tuple[str, ...]] = ()
    # emitted even when None
    keep_when_none: ClassVar[Tuple[str, ...]] = ()

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> Dict[str, Any]:
        data = handler(self)
        empty_omitted = {self._wire_name(name, info.by_alias) for name in self.omit_when_empty}
        none_kept = {self._wire_name(name, info.by_alias) for name in self.keep_when_none}
        return {
            key: value
            for key, value in data.items()
            if (value is not None or key in none_kept) and not (key in empty_omitted and len(value) == 0)
        }

    @classmethod
    def _wire_name(cls, name: str, by_alias: bool) -> str:
        field = cls.model_fields[name]
        if by_alias and field.alias:
            return field.alias
        return name

    def to_wire(self) -> Dict[str, Any]:
        """JSON-compatible dict exactly as sent on the wire"""
        return self.model_dump(mode="json", by_alias=True)

    def encode(self) -> bytes:
        """UTF-8 JSON body"""
        return self.model_dump_json(by_alias=True).encode("utf-8")


def decode_wire(model: Type[M], raw: Union[bytes, str, Mapping[str, Any]]) -> M:
    """
    Parse a wire payload into ``model``.

    Raises:
        DecodeError: if the payload is not JSON, misses a required field
            or carries a value of the wrong shape
    """
    try:
        if isinstance(raw, (bytes, bytearray, str)):
            return model.model_validate_json(raw)
        return model.model_validate(raw)
    except ValidationError as e:
        raise _decode_error(e) from e


def _decode_error(error: ValidationError) -> DecodeError:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"]) or "<root>"
    if first["type"] == "missing":
        kind = DecodeErrorKind.MISSING_FIELD
    elif first["type"] == "json_invalid":
        kind = DecodeErrorKind.INVALID_JSON
    else:
        kind = DecodeErrorKind.TYPE_MISMATCH
    return DecodeError(kind, field, first["msg"])
