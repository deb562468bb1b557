"""Repair pipeline: raw upstream text in, renderable shader source out."""

import logging

from repair.declarations import missing_declarations, normalize_declarations
from repair.functions import inject_functions, pending_families
from repair.markdown import strip_markdown

logger = logging.getLogger(__name__)


def repair_shader(text: str) -> str:
    """Run every repair stage over *text* and return the result.

    Order is fixed: unwrap → declarations → helper functions → markdown
    cleanup → trim. The unwrap pass keeps a fence around the whole response
    from ending up below a prepended precision line.
    """
    text = strip_markdown(text)

    missing = missing_declarations(text)
    text = normalize_declarations(text)
    if missing:
        logger.debug("Added declarations: %s", ", ".join(missing))

    pending = pending_families(text)
    text = inject_functions(text)
    if pending:
        logger.debug("Injected helper families: %s", ", ".join(f.name for f in pending))

    return strip_markdown(text).strip()
