"""
llm_sdk: typed chat completion requests and responses

Build a conversation with ChatCompletionRequestBuilder, send it with
LlmSdk.chat_completion and get a ChatCompletionResponse back.
"""

__version__ = "0.1.0"
__author__ = "llm_sdk Contributors"

from .api import HttpxTransport, LlmSdk, Transport
from .exceptions import BuildError, BuildErrorKind, DecodeError, DecodeErrorKind, TransportError
from .models import (
    AssistantMessage,
    ChatCompletionMessage,
    SystemMessage,
    ToolMessage,
    UserMessage,
    new_assistant,
    new_system,
    new_tool,
    new_user,
)
from .request import (
    ChatCompleteModel,
    ChatCompletionRequest,
    ChatCompletionRequestBuilder,
    ChatResponseFormat,
    ChatResponseFormatObject,
)
from .response import (
    ChatCompletionChoice,
    ChatCompletionResponse,
    ChatCompletionUsage,
    FinishReason,
    decode_response,
)
from .tools import (
    FunctionCall,
    FunctionInfo,
    FunctionToolChoice,
    Tool,
    ToolCall,
    ToolChoice,
    ToolChoiceMode,
    ToolType,
)

__all__ = [
    "AssistantMessage",
    "BuildError",
    "BuildErrorKind",
    "ChatCompleteModel",
    "ChatCompletionChoice",
    "ChatCompletionMessage",
    "ChatCompletionRequest",
    "ChatCompletionRequestBuilder",
    "ChatCompletionResponse",
    "ChatCompletionUsage",
    "ChatResponseFormat",
    "ChatResponseFormatObject",
    "DecodeError",
    "DecodeErrorKind",
    "FinishReason",
    "FunctionCall",
    "FunctionInfo",
    "FunctionToolChoice",
    "HttpxTransport",
    "LlmSdk",
    "SystemMessage",
    "Tool",
    "ToolCall",
    "ToolChoice",
    "ToolChoiceMode",
    "ToolMessage",
    "ToolType",
    "TransportError",
    "UserMessage",
    "decode_response",
    "new_assistant",
    "new_system",
    "new_tool",
    "new_user",
    "__version__",
]
