"""Tests for the FastAPI service mode."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from scaffoldgen.config import ConfigError, ScaffoldConfig
from scaffoldgen.generator import Generator
from scaffoldgen.providers import ErrorCategory, ProviderError
from scaffoldgen.service import create_app


class _ErroringProvider:
    name = "anthropic"

    def __init__(self, category: ErrorCategory) -> None:
        self.category = category

    def submit(self, prompt: str) -> str:
        raise ProviderError("anthropic", self.category, "rejected")


@pytest.fixture
def client(mock_config: ScaffoldConfig) -> TestClient:
    return TestClient(create_app(lambda: Generator(mock_config)))


def _client_with_provider(config: ScaffoldConfig, provider: object) -> TestClient:
    generator = Generator(config, provider_factory=lambda model, cfg: provider)
    return TestClient(create_app(lambda: generator))


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_parse_endpoint_returns_project(client: TestClient) -> None:
    text = "```app/page.tsx\nexport default function Page() {}\n```"

    response = client.post("/parse", json={"text": text})

    assert response.status_code == 200
    data = response.json()
    assert [entry["path"] for entry in data["files"]] == ["app/page.tsx"]
    assert data["structure"]["name"] == "root"
    assert data["notes"] == "Generated successfully"


def test_parse_endpoint_falls_back_on_empty_text(client: TestClient) -> None:
    data = client.post("/parse", json={"text": ""}).json()

    assert {entry["path"] for entry in data["files"]} == {"package.json", "app/page.tsx"}
    assert data["dependencies"]["npm"]["next"] == "^14.0.0"


def test_generate_then_poll_job(client: TestClient) -> None:
    response = client.post("/generate", json={"prompt": "A todo app", "model": "gpt4"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    job = body["data"]
    assert job["status"] == "completed"
    assert job["estimated_time"] == 30
    assert [entry["path"] for entry in job["code"]["files"]] == ["package.json", "app/page.tsx"]

    polled = client.get(f"/generate/{job['id']}")
    assert polled.status_code == 200
    assert polled.json()["data"]["id"] == job["id"]
    assert polled.json()["data"]["code"] == job["code"]


@pytest.mark.parametrize(
    "payload",
    [
        {"prompt": "", "model": "gpt4"},
        {"prompt": "A todo app"},
        {},
    ],
)
def test_generate_requires_prompt_and_model(client: TestClient, payload: dict) -> None:
    response = client.post("/generate", json=payload)

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Missing required fields"}


def test_unknown_job_returns_404(client: TestClient) -> None:
    response = client.get("/generate/job_missing")

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Job not found"}


def test_unknown_model_returns_400(client: TestClient, mock_config: ScaffoldConfig) -> None:
    offline = ScaffoldConfig(root=mock_config.root)
    client = TestClient(create_app(lambda: Generator(offline)))

    response = client.post("/generate", json={"prompt": "A todo app", "model": "llama"})

    assert response.status_code == 400
    assert "Unknown model" in response.json()["error"]


def test_missing_credentials_return_500(mock_config: ScaffoldConfig) -> None:
    def factory(model: str, config: ScaffoldConfig) -> object:
        raise ConfigError("Claude API key not configured")

    generator = Generator(mock_config, provider_factory=factory)
    client = TestClient(create_app(lambda: generator))

    response = client.post("/generate", json={"prompt": "A todo app", "model": "claude"})

    assert response.status_code == 500
    assert response.json()["error"] == "Claude API key not configured"


@pytest.mark.parametrize(
    ("category", "status", "message"),
    [
        (
            ErrorCategory.RATE_LIMITED,
            429,
            "Claude API rate limit exceeded. Please wait a moment and try again.",
        ),
        (
            ErrorCategory.INVALID_CREDENTIAL,
            502,
            "Invalid Claude API key. Please check your API key.",
        ),
    ],
)
def test_provider_errors_are_reported(
    mock_config: ScaffoldConfig, category: ErrorCategory, status: int, message: str
) -> None:
    client = _client_with_provider(mock_config, _ErroringProvider(category))

    response = client.post("/generate", json={"prompt": "A todo app", "model": "claude"})

    assert response.status_code == status
    assert response.json() == {"success": False, "error": message}
