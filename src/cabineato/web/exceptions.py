"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cabineato.application import AssemblyBuildError
from cabineato.application.config import ConfigError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid configuration",
                "error_type": exc.error_type,
                "details": [
                    {"path": d.get("path"), "message": d.get("message")}
                    for d in exc.details
                ],
            },
        )

    @app.exception_handler(AssemblyBuildError)
    async def build_error_handler(
        request: Request, exc: AssemblyBuildError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Assembly generation failed",
                "error_type": "generation",
                "details": [{"message": e} for e in exc.errors],
            },
        )
