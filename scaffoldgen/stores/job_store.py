"""Expiring in-memory store for generation jobs."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

from ..models import ProjectResult


class JobStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


@dataclass
class GenerationJob:
    """State of one generation request."""

    id: str
    status: JobStatus
    created_at: datetime
    result: Optional[ProjectResult] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "status": self.status.value,
            "created_at": self.created_at.isoformat().replace("+00:00", "Z"),
        }
        if self.result is not None:
            data["code"] = self.result.to_dict()
        if self.error is not None:
            data["error"] = self.error
        return data


def new_job(job_id: str, status: JobStatus = JobStatus.PENDING) -> GenerationJob:
    return GenerationJob(id=job_id, status=status, created_at=datetime.now(UTC))


class JobStore:
    """Stores jobs keyed by id; entries vanish ``ttl_seconds`` after their last write."""

    def __init__(
        self,
        ttl_seconds: float = 3600.0,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[float, GenerationJob]] = {}
        self._lock = threading.Lock()

    def put(self, job: GenerationJob) -> None:
        """Store ``job`` and evict whatever has expired since the last write."""
        with self._lock:
            now = self._clock()
            self._evict(now)
            self._entries[job.id] = (now + self._ttl, job)

    def get(self, job_id: str) -> Optional[GenerationJob]:
        with self._lock:
            entry = self._entries.get(job_id)
            if entry is None:
                return None
            expires_at, job = entry
            if expires_at <= self._clock():
                del self._entries[job_id]
                return None
            return job

    def purge_expired(self) -> int:
        """Drop every expired entry and return how many were removed."""
        with self._lock:
            return self._evict(self._clock())

    def _evict(self, now: float) -> int:
        expired = [key for key, (expires_at, _) in self._entries.items() if expires_at <= now]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


__all__ = ["GenerationJob", "JobStatus", "JobStore", "new_job"]
