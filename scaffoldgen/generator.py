"""Coordinates prompt enhancement, provider submission and parsing."""

from __future__ import annotations

import random
import string
import time
from typing import Optional

from .config import ScaffoldConfig, load_config
from .logging import get_logger
from .parsing import parse_completion
from .prompting import GenerationRequest, PromptEnhancer
from .providers import ProviderError, ProviderFactory, create_provider, describe_error
from .stores import GenerationJob, JobStatus, JobStore, new_job

_ID_ALPHABET = string.ascii_lowercase + string.digits


def new_job_id() -> str:
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"job_{int(time.time() * 1000)}_{suffix}"


class Generator:
    """Runs one generation request end to end and records it as a job."""

    def __init__(
        self,
        config: ScaffoldConfig | None = None,
        *,
        provider_factory: ProviderFactory = create_provider,
        job_store: JobStore | None = None,
        enhancer: PromptEnhancer | None = None,
    ) -> None:
        self.config = config or load_config()
        self.provider_factory = provider_factory
        self.jobs = job_store if job_store is not None else JobStore(self.config.jobs.ttl_seconds)
        self.enhancer = enhancer or PromptEnhancer()
        self.logger = get_logger("generator")

    def generate(self, request: GenerationRequest) -> GenerationJob:
        """Generate a project for ``request``.

        Provider failures mark the job as errored and propagate unchanged.
        """
        if not request.prompt or not request.prompt.strip() or not request.model:
            raise ValueError("Missing required fields: prompt and model")

        provider = self.provider_factory(request.model, self.config)

        job = new_job(new_job_id(), JobStatus.PROCESSING)
        self.jobs.put(job)
        self.logger.info("Started %s using %s (%s)", job.id, request.model, provider.name)

        enhanced = self.enhancer.enhance(request)
        try:
            completion = provider.submit(enhanced)
        except ProviderError as exc:
            job.status = JobStatus.ERROR
            job.error = describe_error(exc)
            self.jobs.put(job)
            self.logger.error("Job %s failed: %s", job.id, exc)
            raise

        job.result = parse_completion(completion)
        job.status = JobStatus.COMPLETED
        self.jobs.put(job)
        self.logger.info("Completed %s with %d files", job.id, len(job.result.files))
        return job

    def get_job(self, job_id: str) -> Optional[GenerationJob]:
        return self.jobs.get(job_id)


__all__ = ["Generator", "new_job_id"]
