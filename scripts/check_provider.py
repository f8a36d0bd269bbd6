#!/usr/bin/env python3
"""
Check which models the configured provider will actually serve.

Sends a short "Say hello" completion to each model and reports success or
the provider's error. Reads AI_API_KEY / AI_BASE_URL from the environment
or .env, like the service itself.

Usage:
    python scripts/check_provider.py
    python scripts/check_provider.py gemini-2.5-flash gemini-2.0-flash
"""

import argparse
import asyncio
import sys

from dotenv import load_dotenv
from loguru import logger
from openai import AsyncOpenAI, OpenAIError

from app.core.config import Settings

DEFAULT_MODELS = ["gemini-2.5-flash", "gemini-2.0-flash", "gemini-1.5-flash"]


async def check_model(client: AsyncOpenAI, model: str) -> bool:
    logger.info(f"Testing generation with: {model}")
    try:
        response = await client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": "Say hello"}],
        )
        logger.success(f"SUCCESS [{model}]: {response.choices[0].message.content}")
        return True
    except OpenAIError as e:
        logger.error(f"FAILED [{model}]: {str(e)}")
        return False


async def run(models: list[str]) -> int:
    settings = Settings()
    client = AsyncOpenAI(api_key=settings.AI_API_KEY, base_url=settings.AI_BASE_URL, max_retries=0)
    results = [await check_model(client, model) for model in models]
    return 0 if any(results) else 1


def main():
    parser = argparse.ArgumentParser(description="Check provider model availability")
    parser.add_argument("models", nargs="*", default=DEFAULT_MODELS, help="Model ids to try")
    args = parser.parse_args()

    load_dotenv()
    sys.exit(asyncio.run(run(args.models)))


if __name__ == "__main__":
    main()
