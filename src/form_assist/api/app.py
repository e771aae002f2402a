"""
Starlette application serving the Form Assist HTTP API.

Routes:
    POST /ai/form-assist      apply a natural-language edit to a schema
    POST /ai/validate-schema  validate a schema and report its complexity
    GET  /ai/limits           report the complexity limit and availability
    GET  /health              service status
"""

import json
import logging
import secrets
import string
import time

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from form_assist.errors import FormAssistError, InputMalformed
from form_assist.orchestrator import FormAssistOrchestrator, parse_request


logger = logging.getLogger(__name__)

PREVIEW_ID_ALPHABET = string.ascii_lowercase + string.digits


def new_preview_id() -> str:
    """Build a preview id of the form ai_preview_<ms>_<random9>."""
    suffix = "".join(secrets.choice(PREVIEW_ID_ALPHABET) for _ in range(9))
    return f"ai_preview_{int(time.time() * 1000)}_{suffix}"


async def _read_json(request: Request):
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InputMalformed("Request body must be valid JSON") from e


def create_app(orchestrator: FormAssistOrchestrator | None = None) -> Starlette:
    """
    Create the HTTP application.

    Args:
        orchestrator: Orchestrator serving the requests. If None, one is
            built from the global configuration on first use.
    """
    state: dict[str, FormAssistOrchestrator] = {}
    if orchestrator is not None:
        state["orchestrator"] = orchestrator

    def get_orchestrator() -> FormAssistOrchestrator:
        if "orchestrator" not in state:
            state["orchestrator"] = FormAssistOrchestrator()
        return state["orchestrator"]

    async def form_assist(request: Request) -> JSONResponse:
        body = await _read_json(request)
        assist_request = parse_request(body)

        logger.info(f"AI form assist request: {assist_request.message[:80]!r}")
        result = await get_orchestrator().generate(assist_request)

        data = result.to_response()
        data["previewId"] = new_preview_id()
        return JSONResponse({"data": data})

    async def validate_schema(request: Request) -> JSONResponse:
        body = await _read_json(request)
        if not isinstance(body, dict) or body.get("schema") is None:
            return JSONResponse({"error": "Schema is required"}, status_code=400)

        return JSONResponse({"data": get_orchestrator().validate_schema(body["schema"])})

    async def limits(request: Request) -> JSONResponse:
        return JSONResponse({"data": get_orchestrator().limits()})

    async def health_check(request: Request) -> JSONResponse:
        """Health check endpoint."""
        return JSONResponse({
            "status": "healthy",
            "service": "form-assist",
            "aiEnabled": get_orchestrator().generator.is_available(),
        })

    async def handle_form_assist_error(request: Request, exc: FormAssistError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(f"{request.url.path} failed: {exc.message}")
        return JSONResponse(exc.to_dict(), status_code=exc.status_code)

    return Starlette(
        routes=[
            Route("/ai/form-assist", form_assist, methods=["POST"]),
            Route("/ai/validate-schema", validate_schema, methods=["POST"]),
            Route("/ai/limits", limits, methods=["GET"]),
            Route("/health", health_check, methods=["GET"]),
        ],
        exception_handlers={FormAssistError: handle_form_assist_error},
    )
