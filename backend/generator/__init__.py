"""Shader generator package: public API re-exports."""

from generator.client import (
    CompleteFn,
    GenerationError,
    UpstreamResponseError,
    UpstreamStatusError,
    anthropic_completer,
    generate_shader,
)
from generator.prompts import SYSTEM_PROMPT, build_user_prompt
