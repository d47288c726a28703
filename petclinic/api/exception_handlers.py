from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from petclinic.api.schemas import FieldValidationErrorOut
from petclinic.core.metrics import route_template
from petclinic.domain.exceptions import BusinessValidationError, FieldValidationError

logger = logging.getLogger("petclinic.business_validation")


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None) or request.headers.get("X-Request-ID")


def register_exception_handlers(app: FastAPI) -> None:
    """Register application exception handlers."""

    @app.exception_handler(BusinessValidationError)
    async def handle_business_validation_error(
        request: Request,
        exc: BusinessValidationError,
    ) -> JSONResponse:
        # Never log request bodies or query values.
        logger.info(
            "Business validation failed",
            extra={
                "request_id": _request_id(request),
                "http_method": request.method,
                "request_path": route_template(request),
                "status_code": 400,
                "error": "business_validation",
            },
        )
        return JSONResponse(status_code=400, content={"detail": exc.message})

    @app.exception_handler(FieldValidationError)
    async def handle_field_validation_error(
        request: Request,
        exc: FieldValidationError,
    ) -> JSONResponse:
        report = exc.report
        logger.info(
            "Field validation failed",
            extra={
                "request_id": _request_id(request),
                "http_method": request.method,
                "request_path": route_template(request),
                "status_code": 400,
                "error": "field_validation",
                "error_fields": report.fields,
                "error_codes": [e.code for e in report.errors],
            },
        )
        body = FieldValidationErrorOut(detail=exc.message, errors=report.to_list())
        return JSONResponse(status_code=400, content=body.model_dump())
