"""Upstream completion call and shader generation entry point."""

import logging
from typing import Awaitable, Callable

import anthropic

from generator.prompts import SYSTEM_PROMPT, build_user_prompt
from repair import repair_shader

logger = logging.getLogger(__name__)

# prompt → raw completion text; raises GenerationError on failure
CompleteFn = Callable[[str], Awaitable[str]]


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class GenerationError(Exception):
    """Base class; str(exc) is the message returned to the client."""


class UpstreamStatusError(GenerationError):
    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"HTTP {status_code}")


class UpstreamResponseError(GenerationError):
    def __init__(self, detail: str = ""):
        self.detail = detail
        super().__init__("API failure")


# ---------------------------------------------------------------------------
# Anthropic-backed completer
# ---------------------------------------------------------------------------

def _first_text(response) -> str:
    for block in getattr(response, "content", None) or []:
        if getattr(block, "type", None) == "text":
            return block.text
    raise UpstreamResponseError("response has no text block")


def anthropic_completer(
    api_key: str,
    model: str,
    max_tokens: int = 1500,
    temperature: float = 0.8,
    client: anthropic.AsyncAnthropic | None = None,
) -> CompleteFn:
    """Build a CompleteFn that sends the shader system prompt plus *prompt* to Claude."""
    client = client or anthropic.AsyncAnthropic(api_key=api_key)

    async def complete(prompt: str) -> str:
        try:
            response = await client.messages.create(
                model=model,
                max_tokens=max_tokens,
                temperature=temperature,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIStatusError as e:
            logger.error("Anthropic API HTTP %s: %s", e.status_code, e.message)
            raise UpstreamStatusError(e.status_code) from e
        except anthropic.APIError as e:
            logger.error("Anthropic API error: %s", e)
            raise UpstreamResponseError(str(e)) from e

        try:
            return _first_text(response)
        except UpstreamResponseError as e:
            logger.error("Anthropic API error: %s", e.detail)
            raise

    return complete


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

async def generate_shader(description: str, complete: CompleteFn) -> str:
    """Ask the upstream model for a shader matching *description* and repair it."""
    logger.debug("Calling upstream with prompt: %r", description)
    raw = await complete(build_user_prompt(description))
    logger.debug("Got %d-byte shader", len(raw.encode("utf-8")))
    return repair_shader(raw)
