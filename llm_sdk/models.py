"""
Conversation messages, tagged on the wire by their role
"""

from typing import Annotated, Iterable, Literal, Optional, Tuple, Union

from pydantic import AfterValidator, Field

from .fields import WireModel
from .tools import ToolCall

# Distinguishes participants of the same role; an empty name is treated as absent
ParticipantName = Annotated[Optional[str], AfterValidator(lambda value: value or None)]


class SystemMessage(WireModel):
    role: Literal["system"] = "system"
    content: str
    name: ParticipantName = None


class UserMessage(WireModel):
    role: Literal["user"] = "user"
    content: str
    name: ParticipantName = None


class AssistantMessage(WireModel):
    role: Literal["assistant"] = "assistant"
    # null when the model answered with tool calls only
    content: Optional[str] = None
    name: ParticipantName = None
    tool_calls: Tuple[ToolCall, ...] = ()

    omit_when_empty = ("tool_calls",)


class ToolMessage(WireModel):
    role: Literal["tool"] = "tool"
    content: str
    tool_call_id: str


ChatCompletionMessage = Annotated[
    Union[SystemMessage, UserMessage, AssistantMessage, ToolMessage],
    Field(discriminator="role"),
]


def new_system(content: str, name: str = "") -> SystemMessage:
    return SystemMessage(content=content, name=name)


def new_user(content: str, name: str = "") -> UserMessage:
    return UserMessage(content=content, name=name)


def new_assistant(content: Optional[str], name: str = "", tool_calls: Iterable[ToolCall] = ()) -> AssistantMessage:
    return AssistantMessage(content=content, name=name, tool_calls=tuple(tool_calls))


def new_tool(content: str, tool_call_id: str) -> ToolMessage:
    """Result of executing ``tool_call_id``, fed back to the model"""
    return ToolMessage(content=content, tool_call_id=tool_call_id)
