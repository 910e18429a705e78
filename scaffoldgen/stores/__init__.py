"""Storage helpers for scaffoldgen."""

from .job_store import GenerationJob, JobStatus, JobStore, new_job

__all__ = ["GenerationJob", "JobStatus", "JobStore", "new_job"]
