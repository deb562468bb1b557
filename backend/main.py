"""
Shader backend: FastAPI server.

Turns a natural-language description into a repaired GLSL fragment shader.
Rendering happens client-side in WebGL; this service only talks to the model
and guarantees the returned source fits the renderer's declaration contract.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import config
import generator

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

DESCRIPTION_REQUIRED = "Description parameter is required"


# ---------------------------------------------------------------------------
# Upstream completer (created lazily, on the first generation request)
# ---------------------------------------------------------------------------

_completer: generator.CompleteFn | None = None


async def _configured_complete(prompt: str) -> str:
    global _completer
    if _completer is None:
        _completer = generator.anthropic_completer(
            api_key=config.get_api_key(),
            model=config.ANTHROPIC_MODEL,
            max_tokens=config.MAX_OUTPUT_TOKENS,
            temperature=config.TEMPERATURE,
        )
    return await _completer(prompt)


def get_completer() -> generator.CompleteFn:
    """Dependency returning the upstream completion capability."""
    return _configured_complete


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        config.get_api_key()
    except config.MissingApiKeyError as e:
        logger.warning("%s; generation requests will fail until it is set", e)
    logger.info("Using model %s", config.ANTHROPIC_MODEL)
    yield


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

app = FastAPI(title="Shader Backend", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# REST endpoints
# ---------------------------------------------------------------------------

@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/api/generate_shader")
async def generate_shader(
    request: Request,
    complete: generator.CompleteFn = Depends(get_completer),
):
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    description = payload.get("description") if isinstance(payload, dict) else None
    if not isinstance(description, str) or not description.strip():
        return JSONResponse({"error": DESCRIPTION_REQUIRED}, status_code=400)

    try:
        code = await generator.generate_shader(description, complete)
    except generator.GenerationError as e:
        return JSONResponse({"error": str(e)}, status_code=400)
    except config.MissingApiKeyError as e:
        logger.error("Cannot reach upstream: %s", e)
        return JSONResponse({"error": str(e)}, status_code=500)

    return {"shader_code": code}


if __name__ == "__main__":
    uvicorn.run("main:app", host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())
