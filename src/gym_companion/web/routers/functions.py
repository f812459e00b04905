"""Proxy endpoints in front of the AI gateway.

Both endpoints are stateless JSON handlers. Every response, including
errors and the bodiless pre-flight answer, carries permissive CORS headers.
"""

import json
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response

from ...errors import FunctionError
from ...services.functions import analyze_machine, generate_exercises
from ..deps import get_gateway

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/functions/v1", tags=["functions"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


def _json(payload: dict, status_code: int = 200) -> JSONResponse:
    return JSONResponse(payload, status_code=status_code, headers=CORS_HEADERS)


def _preflight() -> Response:
    return Response(status_code=200, headers=CORS_HEADERS)


async def _run(request: Request, handler, name: str) -> JSONResponse:
    """Parse the body, run a handler and map its failures to responses."""
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("%s: request body is not valid JSON", name)
        return _json({"error": "Request body must be valid JSON"}, 400)

    try:
        result = await handler(body, get_gateway(request))
    except FunctionError as e:
        return _json({"error": e.message}, e.status)
    except Exception as e:
        logger.exception("Error in %s function", name)
        return _json({"error": str(e) or "Internal server error"}, 500)

    return _json(result)


@router.options("/analyze-machine")
async def analyze_machine_preflight():
    return _preflight()


@router.post("/analyze-machine")
async def analyze_machine_endpoint(request: Request):
    """Identify a machine from a base64 photo."""
    return await _run(request, analyze_machine, "analyze-machine")


@router.options("/generate-exercises")
async def generate_exercises_preflight():
    return _preflight()


@router.post("/generate-exercises")
async def generate_exercises_endpoint(request: Request):
    """Generate an exercise plan for a machine and workout goal."""
    return await _run(request, generate_exercises, "generate-exercises")
