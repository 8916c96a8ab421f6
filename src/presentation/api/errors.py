"""
Errors - Traduction des exceptions en reponses HTTP.

Responsabilite unique:
----------------------
Rendre toutes les erreurs sous la meme forme:

    {"status": "fail" | "error", "message": ..., "errorCode": ..., "timestamp": ...}

"fail" pour les erreurs client (4xx), "error" pour les erreurs serveur.
"""

from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.domain.exceptions import DomainException
from src.infrastructure.logging import get_logger
from src.presentation.api.schemas import ErrorResponse

logger = get_logger(__name__)


def error_response(
    status_code: int,
    message: str,
    error_code: str,
    field: Optional[str] = None,
) -> JSONResponse:
    """Construit une reponse d'erreur normalisee."""
    body = ErrorResponse(
        status="fail" if status_code < 500 else "error",
        message=message,
        error_code=error_code,
        timestamp=datetime.now(timezone.utc),
        field=field,
    )
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body, by_alias=True, exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Enregistre les handlers d'exceptions sur l'application."""

    @app.exception_handler(DomainException)
    async def handle_domain_exception(request: Request, exc: DomainException):
        if exc.status_code >= 500:
            logger.error("domain_error", error_code=exc.code, error=exc.message)
        else:
            logger.info("request_rejected", error_code=exc.code, error=exc.message)
        return error_response(
            exc.status_code,
            exc.message,
            exc.code,
            field=getattr(exc, "field", None),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = errors[0] if errors else {}
        location = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(location) or None
        message = first.get("msg", "Invalid request")
        if field:
            message = f"{field}: {message}"
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            message,
            "VALIDATION_ERROR",
            field=field,
        )
