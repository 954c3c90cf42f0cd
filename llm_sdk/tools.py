"""
Tool definitions, tool choice and tool calls for function calling
"""

import json
from enum import auto
from typing import Any, Optional, Union

from .fields import WireEnum, WireModel


class ToolType(WireEnum):
    """The type of a tool. Currently only functions are supported."""
    FUNCTION = auto()


class FunctionInfo(WireModel):
    """A function the model may generate JSON inputs for"""
    description: str
    # a-z, A-Z, 0-9, underscores and dashes, at most 64 characters
    name: str
    # JSON Schema object, passed through untouched.
    # A function without parameters uses {"type": "object", "properties": {}}
    parameters: Any

    keep_when_none = ("parameters",)


class Tool(WireModel):
    type: ToolType = ToolType.FUNCTION
    function: FunctionInfo

    @classmethod
    def function_tool(cls, name: str, description: str, parameters: Any) -> "Tool":
        return cls(function=FunctionInfo(name=name, description=description, parameters=parameters))


class ToolChoiceMode(WireEnum):
    """
    NONE: the model generates a message instead of calling a function.
    AUTO: the model picks between a message and a function call.
    """
    NONE = auto()
    AUTO = auto()


class FunctionName(WireModel):
    type: ToolType = ToolType.FUNCTION
    name: str


class FunctionToolChoice(WireModel):
    """Forces the model to call the named function"""
    function: FunctionName

    def __init__(self, name: Optional[str] = None, **data: Any):
        if name is not None:
            data["function"] = FunctionName(name=name)
        super().__init__(**data)

    @property
    def name(self) -> str:
        return self.function.name


ToolChoice = Union[ToolChoiceMode, FunctionToolChoice]


class FunctionCall(WireModel):
    """The function the model called"""
    name: str
    # JSON generated by the model, kept verbatim. It may be invalid JSON.
    arguments: str

    def parsed_arguments(self) -> Any:
        """Decode the argument string; raises json.JSONDecodeError when the model produced invalid JSON"""
        return json.loads(self.arguments)


class ToolCall(WireModel):
    """A tool call generated by the model, round-tripped as assistant history"""
    id: str
    type: ToolType = ToolType.FUNCTION
    function: FunctionCall
