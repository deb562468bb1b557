"""
Helper-function injector.

Generated shaders often call common SDF / noise / rotation helpers without
defining them. Each entry of FUNCTION_FAMILIES pairs a usage trigger with a
definition marker; when the trigger is present and the marker is not, the
canonical GLSL body is spliced in after the declaration block.
"""

import logging
from dataclasses import dataclass

from repair.anchors import split_at_anchor
from repair.declarations import PRECISION, U_MOUSE, UNIFORMS, VARYING

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FunctionFamily:
    name: str
    trigger: str   # substring indicating usage
    marker: str    # substring indicating an existing definition
    body: str      # GLSL spliced in verbatim


# ---------------------------------------------------------------------------
# Canonical definitions
# ---------------------------------------------------------------------------

_SD_BOX = """

float sdBox(vec3 p, vec3 b) {
  vec3 q = abs(p) - b;
  return length(max(q, 0.0)) + min(max(q.x, max(q.y, q.z)), 0.0);
}
"""

_SD_SPHERE = """

float sdSphere(vec3 p, float s) {
  return length(p) - s;
}
"""

_SD_PLANE = """

float sdPlane(vec3 p) {
  return p.y;
}
"""

_NOISE = """

float hash(float n) {
  return fract(sin(n) * 43758.5453);
}

float noise(vec2 p) {
  vec2 i = floor(p);
  vec2 f = fract(p);
  f = f * f * (3.0 - 2.0 * f);
  float n = i.x + i.y * 57.0;
  return mix(mix(hash(n), hash(n + 1.0), f.x),
             mix(hash(n + 57.0), hash(n + 58.0), f.x), f.y);
}
"""

_ROTATIONS = """

vec3 rotateX(vec3 p, float a) {
  float c = cos(a);
  float s = sin(a);
  return vec3(p.x, c * p.y - s * p.z, s * p.y + c * p.z);
}

vec3 rotateY(vec3 p, float a) {
  float c = cos(a);
  float s = sin(a);
  return vec3(c * p.x + s * p.z, p.y, -s * p.x + c * p.z);
}

vec3 rotateZ(vec3 p, float a) {
  float c = cos(a);
  float s = sin(a);
  return vec3(c * p.x - s * p.y, s * p.x + c * p.y, p.z);
}
"""

FUNCTION_FAMILIES = (
    FunctionFamily("sdBox", "sdBox", "float sdBox", _SD_BOX),
    FunctionFamily("sdSphere", "sdSphere", "float sdSphere", _SD_SPHERE),
    FunctionFamily("sdPlane", "sdPlane", "float sdPlane", _SD_PLANE),
    FunctionFamily("noise", "noise", "float noise", _NOISE),
    # rotateX/Y/Z travel together behind one trigger/marker pair
    FunctionFamily("rotate", "rotate", "vec3 rotate", _ROTATIONS),
)

ANCHOR_CHAIN = (VARYING, U_MOUSE, PRECISION)


# ---------------------------------------------------------------------------
# Injection
# ---------------------------------------------------------------------------

def _needs(family: FunctionFamily, text: str) -> bool:
    return family.trigger in text and family.marker not in text


def pending_families(text: str) -> list[FunctionFamily]:
    """Families whose helpers *text* uses but does not define."""
    return [f for f in FUNCTION_FAMILIES if _needs(f, text)]


def _scaffold(text: str) -> str:
    """Uniform + varying lines to synthesize ahead of a body when no varying exists."""
    lines = [line for line in UNIFORMS if line not in text]
    head = "\n\n" + "\n".join(lines) if lines else ""
    return f"{head}\n\n{VARYING}"


def _splice(text: str, body: str) -> str:
    split = split_at_anchor(text, ANCHOR_CHAIN)
    if split is None:
        # Nothing to anchor on: put a full scaffold in front.
        return PRECISION + _scaffold(text) + body + text
    if split.anchor == VARYING:
        lead = ""
    elif split.anchor == U_MOUSE:
        lead = f"\n\n{VARYING}"
    else:
        lead = _scaffold(split.before + split.after)
    return split.before + split.anchor + lead + body + split.after


def inject_functions(text: str) -> str:
    """Splice in every helper family that *text* references but never defines.

    Families are checked one after another against the current text, so a
    rerun on the result injects nothing.
    """
    for family in FUNCTION_FAMILIES:
        if _needs(family, text):
            text = _splice(text, family.body)
            logger.debug("Injected %s helpers", family.name)
    return text
