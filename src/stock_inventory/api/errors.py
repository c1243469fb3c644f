"""
Error Handlers - Map Domain Failures to HTTP Responses.

    | Failure                 | Status |
    |-------------------------|--------|
    | VALIDATION_ERROR        | 400    |
    | malformed request body  | 400    |
    | not found               | 404    |
    | DOMAIN_REJECTION        | 422    |
    | TRANSIENT_REJECTION     | 503    |

Error body: {"error": {"code", "message", "stage_rank", "stage_name"}}
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog

from stock_inventory.domain.exceptions import PipelineRejectedError, StockNotFoundError
from stock_inventory.domain.value_objects import FailureKind

logger = structlog.get_logger(__name__)

STATUS_BY_FAILURE_KIND: Dict[FailureKind, int] = {
    FailureKind.VALIDATION_ERROR: 400,
    FailureKind.DOMAIN_REJECTION: 422,
    FailureKind.TRANSIENT_REJECTION: 503,
}


def error_body(
    code: str,
    message: str,
    stage_rank: Optional[int] = None,
    stage_name: Optional[str] = None,
) -> Dict[str, Any]:
    """Standard error envelope."""
    return {
        "error": {
            "code": code,
            "message": message,
            "stage_rank": stage_rank,
            "stage_name": stage_name,
        }
    }


async def pipeline_rejected_handler(
    request: Request, exc: PipelineRejectedError
) -> JSONResponse:
    status_code = STATUS_BY_FAILURE_KIND[exc.failure_kind]
    logger.info(
        "request_rejected",
        path=request.url.path,
        status_code=status_code,
        failure_kind=exc.failure_kind.value,
        stage_rank=exc.stage_rank,
    )
    return JSONResponse(
        status_code=status_code,
        content=error_body(
            exc.failure_kind.value,
            exc.result.message,
            exc.stage_rank,
            exc.stage_name,
        ),
    )


async def not_found_handler(request: Request, exc: StockNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content=error_body("not_found", exc.message))


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )
    return JSONResponse(
        status_code=400,
        content=error_body(FailureKind.VALIDATION_ERROR.value, problems),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach all domain error handlers to the app."""
    app.add_exception_handler(PipelineRejectedError, pipeline_rejected_handler)
    app.add_exception_handler(StockNotFoundError, not_found_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
