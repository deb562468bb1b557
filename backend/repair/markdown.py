"""Strip markdown residue (code fences, language tags) from generated shader text."""

import re

# Fence opener: any language tag on its own line, or a bare/glsl-tagged fence glued to code.
_OPEN_FENCE = re.compile(r"\A\s*```(?:[\w+-]*[ \t]*(?:\r?\n|\Z)|(?:glsl)?)", re.IGNORECASE)
_CLOSE_FENCE = re.compile(r"\s*```\s*\Z")
_LANG_LINE = re.compile(r"\A\s*glsl[ \t]*(?:\r?\n|\Z)", re.IGNORECASE)
_TYPE_LINE = re.compile(r"\A\s*shader[ \t]*(?:\r?\n|\Z)", re.IGNORECASE)

_PASSES = (_OPEN_FENCE, _CLOSE_FENCE, _LANG_LINE, _TYPE_LINE)


def _strip_once(text: str) -> str:
    for pattern in _PASSES:
        text = pattern.sub("", text, count=1)
    return text.strip()


def strip_markdown(text: str) -> str:
    """Remove fences and tag lines anchored at the start or end of *text*.

    Backticks anywhere else are left alone. Passes repeat until nothing
    changes, so nested wrappers (a fence around a ``glsl`` line) unwrap fully.
    """
    while True:
        stripped = _strip_once(text)
        if stripped == text:
            return stripped
        text = stripped
