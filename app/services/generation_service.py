import html
import re
from typing import Any, Optional

from loguru import logger
from openai import AsyncOpenAI, OpenAIError

from app.core.config import Settings
from app.core.exceptions import BadRequest, ProviderError
from app.core.metrics import GENERATION_REQUESTS
from app.prompts.prompt_factory import get_prompt_by_kind
from app.schemas.career import CareerProfile, GenerationKind

DEFAULT_JOB_TITLE = "Career Opportunity"

_HEADING_PATTERN = re.compile(r"<h3[^>]*>(.*?)</h3>", re.IGNORECASE | re.DOTALL)
_TAG_PATTERN = re.compile(r"<[^>]+>")


def extract_job_title(markup: str) -> str:
    """Return the text of the first <h3> heading, used as the suggested job title."""
    match = _HEADING_PATTERN.search(markup or "")
    if match:
        title = html.unescape(_TAG_PATTERN.sub("", match.group(1))).strip()
        if title:
            return title
    return DEFAULT_JOB_TITLE


class GenerationGateway:
    """
    Turns a profile into a provider request and returns the generated markup.

    Talks to any OpenAI-compatible chat completions endpoint. The markup is
    returned exactly as the provider produced it; rendering it safely is the
    presentation layer's job. No retries are made, and every provider-side
    failure surfaces as ``ProviderError``.
    """

    def __init__(self, settings: Settings, client: Optional[Any] = None):
        self.model = settings.AI_MODEL
        if client is None:
            client_kwargs = {
                "api_key": settings.AI_API_KEY,
                "base_url": settings.AI_BASE_URL,
                "max_retries": 0,
            }
            # No timeout is set unless configured; a hung provider call holds its request
            if settings.AI_TIMEOUT_SECONDS is not None:
                client_kwargs["timeout"] = settings.AI_TIMEOUT_SECONDS
            client = AsyncOpenAI(**client_kwargs)
        self.client = client

    async def generate(
        self,
        kind: GenerationKind,
        profile: CareerProfile,
        job_title: Optional[str] = None,
    ) -> str:
        """
        Generate guidance markup of the given kind.

        Args:
            kind: Which document to produce
            profile: The student's profile
            job_title: Target position, required by the feature kinds

        Returns:
            str: HTML fragment produced by the provider

        Raises:
            BadRequest: kind needs a job title and none was given
            ProviderError: the provider call failed or returned nothing
        """
        prompt_template = get_prompt_by_kind(kind)
        try:
            prompt = prompt_template.render(profile, job_title)
        except ValueError as e:
            raise BadRequest(str(e))

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
            )
        except OpenAIError as e:
            GENERATION_REQUESTS.labels(kind=kind.value, outcome="error").inc()
            logger.error(f"Provider call failed for {kind.value}: {str(e)}")
            raise ProviderError()

        text = None
        if response is not None and getattr(response, "choices", None):
            message = getattr(response.choices[0], "message", None)
            text = getattr(message, "content", None)

        if not text or not text.strip():
            GENERATION_REQUESTS.labels(kind=kind.value, outcome="empty").inc()
            logger.error(f"Provider returned no content for {kind.value}")
            raise ProviderError()

        GENERATION_REQUESTS.labels(kind=kind.value, outcome="success").inc()
        logger.debug(f"Generated {len(text)} characters for {kind.value}")
        return text
