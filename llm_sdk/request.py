"""
Chat completion request and its builder
"""

import logging
from enum import auto
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from pydantic import StrictBool, StrictFloat, StrictInt, StrictStr, ValidationError

from .exceptions import BuildError, BuildErrorKind
from .fields import UNSET, WireEnum, WireModel
from .models import ChatCompletionMessage
from .tools import Tool, ToolChoice

logger = logging.getLogger(__name__)


class ChatCompleteModel(WireEnum):
    """Models available to the chat completion endpoint"""
    GPT3_TURBO = "gpt-3.5-turbo-1106"
    GPT3_TURBO_INSTRUCT = "gpt-3.5-turbo-instruct"
    GPT4_TURBO = "gpt-4-1106-preview"
    GPT4_TURBO_VISION = "gpt-4-1106-vision-preview"


class ChatResponseFormat(WireEnum):
    TEXT = auto()
    # JSON mode: the generated message is guaranteed to be valid JSON
    JSON = auto()


class ChatResponseFormatObject(WireModel):
    type: ChatResponseFormat = ChatResponseFormat.JSON


# Values for fields the caller never set. Fields missing here stay absent.
DEFAULTS: Dict[str, Any] = {
    "model": ChatCompleteModel.GPT3_TURBO,
    "tools": (),
}


class ChatCompletionRequest(WireModel):
    """
    A request to the chat completion endpoint.

    Ranges documented by the service (penalties in [-2, 2], temperature
    in [0, 2], altering either temperature or top_p but not both) are not
    checked here; the service enforces them.
    """
    messages: Tuple[ChatCompletionMessage, ...]
    model: ChatCompleteModel
    frequency_penalty: Optional[StrictFloat] = None
    max_tokens: Optional[StrictInt] = None
    n: Optional[StrictInt] = None
    presence_penalty: Optional[StrictFloat] = None
    response_format: Optional[ChatResponseFormatObject] = None
    seed: Optional[StrictInt] = None
    # Up to 4 sequences where generation stops
    stop: Optional[Union[StrictStr, Tuple[StrictStr, ...]]] = None
    stream: Optional[StrictBool] = None
    temperature: Optional[StrictFloat] = None
    top_p: Optional[StrictFloat] = None
    tools: Tuple[Tool, ...] = ()
    tool_choice: Optional[ToolChoice] = None
    user: Optional[StrictStr] = None

    omit_when_empty = ("tools",)

    @classmethod
    def builder(cls) -> "ChatCompletionRequestBuilder":
        return ChatCompletionRequestBuilder()


class ChatCompletionRequestBuilder:
    """
    Collects request fields before producing an immutable ChatCompletionRequest.

    Every setter returns the builder, so calls can be chained. Only
    ``messages`` is required; calling a setter again overrides the
    previous value.
    """

    def __init__(self):
        self._fields: Dict[str, Any] = {name: UNSET for name in ChatCompletionRequest.model_fields}

    def _set(self, field: str, value: Any) -> "ChatCompletionRequestBuilder":
        self._fields[field] = value
        return self

    def messages(self, messages: Iterable[ChatCompletionMessage]) -> "ChatCompletionRequestBuilder":
        return self._set("messages", tuple(messages))

    def model(self, model: ChatCompleteModel) -> "ChatCompletionRequestBuilder":
        return self._set("model", model)

    def frequency_penalty(self, frequency_penalty: float) -> "ChatCompletionRequestBuilder":
        return self._set("frequency_penalty", frequency_penalty)

    def max_tokens(self, max_tokens: int) -> "ChatCompletionRequestBuilder":
        return self._set("max_tokens", max_tokens)

    def n(self, n: int) -> "ChatCompletionRequestBuilder":
        return self._set("n", n)

    def presence_penalty(self, presence_penalty: float) -> "ChatCompletionRequestBuilder":
        return self._set("presence_penalty", presence_penalty)

    def response_format(
        self, response_format: Union[ChatResponseFormat, ChatResponseFormatObject]
    ) -> "ChatCompletionRequestBuilder":
        if isinstance(response_format, ChatResponseFormat):
            response_format = ChatResponseFormatObject(type=response_format)
        return self._set("response_format", response_format)

    def seed(self, seed: int) -> "ChatCompletionRequestBuilder":
        return self._set("seed", seed)

    def stop(self, stop: Union[str, List[str]]) -> "ChatCompletionRequestBuilder":
        if not isinstance(stop, str):
            stop = tuple(stop)
        return self._set("stop", stop)

    def stream(self, stream: bool) -> "ChatCompletionRequestBuilder":
        return self._set("stream", stream)

    def temperature(self, temperature: float) -> "ChatCompletionRequestBuilder":
        return self._set("temperature", temperature)

    def top_p(self, top_p: float) -> "ChatCompletionRequestBuilder":
        return self._set("top_p", top_p)

    def tools(self, tools: Iterable[Tool]) -> "ChatCompletionRequestBuilder":
        return self._set("tools", tuple(tools))

    def tool_choice(self, tool_choice: ToolChoice) -> "ChatCompletionRequestBuilder":
        return self._set("tool_choice", tool_choice)

    def user(self, user: str) -> "ChatCompletionRequestBuilder":
        return self._set("user", user)

    def build(self) -> ChatCompletionRequest:
        """
        Raises:
            BuildError: MISSING_REQUIRED_FIELD if messages were never set,
                INVALID_FIELD if a value does not fit its field
        """
        if self._fields["messages"] is UNSET:
            raise BuildError(BuildErrorKind.MISSING_REQUIRED_FIELD, "messages")

        values = {}
        for name, value in self._fields.items():
            if value is UNSET:
                if name not in DEFAULTS:
                    continue
                value = DEFAULTS[name]
            values[name] = value

        try:
            request = ChatCompletionRequest(**values)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"])
            raise BuildError(BuildErrorKind.INVALID_FIELD, field, first["msg"]) from e

        logger.debug(f"Built request for {request.model.value} with {len(request.messages)} messages")
        return request
