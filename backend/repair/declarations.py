"""
Declaration normalizer: guarantees the runtime's fixed declarations exist.

The renderer binds u_time / u_resolution / u_mouse and interpolates
fragCoord, so every shader it receives must declare them. Missing lines are
spliced next to their closest existing neighbour; lines already present are
left exactly where the upstream text put them.
"""

from repair.anchors import insert_after

PRECISION = "precision mediump float;"
U_TIME = "uniform float u_time;"
U_RESOLUTION = "uniform vec2 u_resolution;"
U_MOUSE = "uniform vec2 u_mouse;"
VARYING = "varying vec2 fragCoord;"

UNIFORMS = (U_TIME, U_RESOLUTION, U_MOUSE)
REQUIRED_DECLARATIONS = (PRECISION, *UNIFORMS, VARYING)


def missing_declarations(text: str) -> list[str]:
    """Return the required declaration lines absent from *text*, in canonical order."""
    return [line for line in REQUIRED_DECLARATIONS if line not in text]


def _absent(text: str, lines: tuple[str, ...]) -> list[str]:
    return [line for line in lines if line not in text]


def _ensure_precision(text: str) -> str:
    if PRECISION in text:
        return text
    return f"{PRECISION}\n\n{text}"


def _ensure_uniforms(text: str) -> str:
    # Only the first unmet branch runs; each one fills in everything after it.
    if U_TIME not in text:
        lines = _absent(text, UNIFORMS)
        return insert_after(text, PRECISION, "\n\n" + "\n".join(lines)) or text
    if U_RESOLUTION not in text:
        lines = _absent(text, (U_RESOLUTION, U_MOUSE))
        return insert_after(text, U_TIME, "\n" + "\n".join(lines)) or text
    if U_MOUSE not in text:
        return insert_after(text, U_RESOLUTION, "\n" + U_MOUSE) or text
    return text


def _ensure_varying(text: str) -> str:
    if VARYING in text:
        return text
    return insert_after(text, U_MOUSE, "\n\n" + VARYING) or text


def normalize_declarations(text: str) -> str:
    """Add whichever of the five required declarations *text* lacks."""
    text = _ensure_precision(text)
    text = _ensure_uniforms(text)
    return _ensure_varying(text)
