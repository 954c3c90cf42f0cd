"""Shared fixtures"""

import pytest

from llm_sdk import ChatCompletionRequestBuilder, ToolChoiceMode, new_system, new_user


@pytest.fixture
def completion_payload():
    """A reply as returned by the service, including fields the models do not declare"""
    return {
        "id": "chatcmpl-8Kp3vX1",
        "object": "chat.completion",
        "created": 1699999999,
        "model": "gpt-3.5-turbo-1106",
        "system_fingerprint": "fp_eeff13170a",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": "Life is what happens.", "refusal": None},
                "logprobs": None,
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 21, "completion_tokens": 6, "total_tokens": 27},
    }


@pytest.fixture
def tool_call_payload(completion_payload):
    payload = dict(completion_payload)
    payload["choices"] = [
        {
            "index": 0,
            "message": {
                "role": "assistant",
                "content": None,
                "tool_calls": [
                    {
                        "id": "call_abc123",
                        "type": "function",
                        "function": {"name": "get_weather", "arguments": "{\"city\": \"Paris\"}"},
                    }
                ],
            },
            "finish_reason": "tool_calls",
        }
    ]
    return payload


@pytest.fixture
def simple_builder():
    """System + user conversation with tool_choice already set to auto"""
    return (
        ChatCompletionRequestBuilder()
        .tool_choice(ToolChoiceMode.AUTO)
        .messages([
            new_system("我可以回答你问我的任何问题.", "Q-bot"),
            new_user("什么是生活?", "zheng"),
        ])
    )
