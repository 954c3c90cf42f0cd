"""
llm_sdk: send one prompt to the chat completion endpoint

Usage: python main.py "What is life?" [--system PROMPT] [--model gpt-4-1106-preview]
"""

import argparse
import asyncio

from llm_sdk.logging_config import setup_logging
from llm_sdk import ChatCompleteModel, ChatCompletionRequestBuilder, LlmSdk, new_system, new_user

logger = setup_logging()


async def ask(prompt: str, system: str, model: ChatCompleteModel) -> str:
    request = (
        ChatCompletionRequestBuilder()
        .messages([new_system(system), new_user(prompt)])
        .model(model)
        .build()
    )
    async with LlmSdk() as sdk:
        response = await sdk.chat_completion(request)

    message = response.first_message()
    return message.content if message and message.content else ""


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Send one prompt to the chat completion endpoint")
    parser.add_argument("prompt")
    parser.add_argument("--system", default="You are a helpful assistant.")
    parser.add_argument(
        "--model",
        type=ChatCompleteModel,
        default=ChatCompleteModel.GPT3_TURBO,
        choices=list(ChatCompleteModel),
    )
    args = parser.parse_args()

    try:
        print(asyncio.run(ask(args.prompt, args.system, args.model)))
    except Exception as e:
        logger.error(f"Request failed: {e}")
        raise
