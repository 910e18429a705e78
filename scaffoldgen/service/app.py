"""FastAPI application entrypoint for scaffoldgen service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import ConfigError
from ..generator import Generator
from ..logging import uvicorn_log_level
from ..parsing import parse_completion
from ..prompting import GenerationRequest
from ..providers import ErrorCategory, ProviderError, describe_error

ESTIMATED_SECONDS = 30


class ParseRequest(BaseModel):
    text: str


class GenerateRequest(BaseModel):
    prompt: str = ""
    model: str = ""
    app_type: str = "web"
    include_backend: bool = False


class JobPayload(BaseModel):
    id: str
    status: str
    code: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    estimated_time: Optional[int] = None


class GenerateResponse(BaseModel):
    success: bool
    data: Optional[JobPayload] = None
    error: Optional[str] = None


class HealthResponse(BaseModel):
    status: str


def create_app(generator_factory: Callable[[], Generator] = Generator) -> FastAPI:
    """Create the FastAPI application exposing parsing and generation."""

    app = FastAPI(title="scaffoldgen", version="0.1.0")
    # One generator per app so the job store outlives individual requests.
    state: Dict[str, Generator] = {}

    async def get_generator() -> Generator:
        if "generator" not in state:
            state["generator"] = generator_factory()
        return state["generator"]

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/parse")
    async def parse(payload: ParseRequest) -> Dict[str, Any]:
        return parse_completion(payload.text).to_dict()

    @app.post("/generate", response_model=GenerateResponse)
    async def generate(
        payload: GenerateRequest,
        generator: Generator = Depends(get_generator),
    ) -> Any:
        if not payload.prompt.strip() or not payload.model:
            return _failure(400, "Missing required fields")

        request = GenerationRequest(
            prompt=payload.prompt,
            model=payload.model,
            app_type=payload.app_type,
            include_backend=payload.include_backend,
        )
        loop = asyncio.get_running_loop()
        job = await loop.run_in_executor(None, generator.generate, request)
        data = job.to_dict()
        return GenerateResponse(
            success=True,
            data=JobPayload(
                id=job.id,
                status=data["status"],
                code=data.get("code"),
                estimated_time=ESTIMATED_SECONDS,
            ),
        )

    @app.get("/generate/{job_id}", response_model=GenerateResponse)
    async def job_status(
        job_id: str,
        generator: Generator = Depends(get_generator),
    ) -> Any:
        job = generator.get_job(job_id)
        if job is None:
            return _failure(404, "Job not found")
        data = job.to_dict()
        return GenerateResponse(
            success=True,
            data=JobPayload(
                id=job.id,
                status=data["status"],
                code=data.get("code"),
                error=data.get("error"),
            ),
        )

    @app.exception_handler(ProviderError)
    async def provider_error_handler(_: Any, exc: ProviderError) -> JSONResponse:
        status = 429 if exc.category is ErrorCategory.RATE_LIMITED else 502
        return _failure(status, describe_error(exc))

    @app.exception_handler(ConfigError)
    async def config_error_handler(_: Any, exc: ConfigError) -> JSONResponse:
        return _failure(500, str(exc))

    @app.exception_handler(ValueError)
    async def value_error_handler(_: Any, exc: ValueError) -> JSONResponse:
        return _failure(400, str(exc))

    return app


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def run_service(
    host: str = "0.0.0.0", port: int = 8000, *, verbose: bool = False
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port, log_level=uvicorn_log_level(verbose))
