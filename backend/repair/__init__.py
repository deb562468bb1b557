"""Shader repair package: public API re-exports."""

from repair.anchors import AnchorSplit, split_at_anchor, insert_after
from repair.declarations import (
    REQUIRED_DECLARATIONS,
    missing_declarations,
    normalize_declarations,
)
from repair.functions import (
    ANCHOR_CHAIN,
    FUNCTION_FAMILIES,
    FunctionFamily,
    inject_functions,
    pending_families,
)
from repair.markdown import strip_markdown
from repair.pipeline import repair_shader
