"""
Chat completion response decoding
"""

from enum import auto
from typing import Any, Mapping, Optional, Tuple, Union

from pydantic import StrictInt, StrictStr, field_validator

from .fields import WireEnum, WireModel, decode_wire
from .models import AssistantMessage
from .request import ChatCompleteModel


class FinishReason(WireEnum):
    """Why the model stopped generating tokens"""
    STOP = auto()
    LENGTH = auto()
    CONTENT_FILTER = auto()
    TOOL_CALLS = auto()
    # deprecated by the service in favour of TOOL_CALLS
    FUNCTION_CALL = auto()


class ChatCompletionUsage(WireModel):
    completion_tokens: StrictInt
    prompt_tokens: StrictInt
    total_tokens: StrictInt


class ChatCompletionChoice(WireModel):
    finish_reason: FinishReason = FinishReason.STOP
    index: StrictInt
    message: AssistantMessage

    @field_validator("finish_reason", mode="before")
    @classmethod
    def _null_is_stop(cls, value: Any) -> Any:
        return FinishReason.STOP if value is None else value


class ChatCompletionResponse(WireModel):
    id: StrictStr
    # More than one if n was greater than 1
    choices: Tuple[ChatCompletionChoice, ...] = ()
    # Unix timestamp in seconds
    created: StrictInt
    model: ChatCompleteModel
    # Backend configuration; compare across requests that share a seed
    system_fingerprint: Optional[str] = None
    # always "chat.completion"
    object: StrictStr
    usage: ChatCompletionUsage

    def first_message(self) -> Optional[AssistantMessage]:
        return self.choices[0].message if self.choices else None


def decode_response(raw: Union[bytes, str, Mapping[str, Any]]) -> ChatCompletionResponse:
    """
    Decode a chat completion reply.

    Raises:
        DecodeError: MISSING_FIELD or TYPE_MISMATCH when a required field
            (id, created, model, object, usage) is absent or malformed
    """
    return decode_wire(ChatCompletionResponse, raw)
