"""Tests for prompt enhancement."""

from __future__ import annotations

from scaffoldgen.prompting import GenerationRequest, PromptEnhancer


def test_web_prompt_contains_sections_in_order() -> None:
    prompt = PromptEnhancer().enhance(
        GenerationRequest(prompt="A recipe sharing site", model="gpt4")
    )

    assert prompt.startswith("Create a Next.js web application with the following requirements:")
    headings = ["MAIN REQUIREMENT:", "TECHNICAL REQUIREMENTS:", "PROJECT STRUCTURE:", "OUTPUT FORMAT:"]
    positions = [prompt.index(heading) for heading in headings]
    assert positions == sorted(positions)
    assert "A recipe sharing site" in prompt
    assert "- Use Next.js 14 with App Router" in prompt
    assert "BACKEND REQUIREMENTS:" not in prompt
    assert "- Include package.json with all dependencies" in prompt


def test_mobile_prompt_with_backend() -> None:
    prompt = PromptEnhancer().enhance(
        GenerationRequest(
            prompt="Habit tracker",
            model="claude",
            app_type="mobile",
            include_backend=True,
        )
    )

    assert prompt.startswith("Create a Flutter mobile application")
    assert "- Use Flutter with latest stable version" in prompt
    assert "BACKEND REQUIREMENTS:" in prompt
    assert "- Use Firestore for database with proper security rules" in prompt


def test_unknown_app_type_defaults_to_web() -> None:
    prompt = PromptEnhancer().enhance(
        GenerationRequest(prompt="x", model="gpt4", app_type="desktop")
    )

    assert "Next.js web application" in prompt


def test_extract_project_config() -> None:
    config = PromptEnhancer().extract_project_config(
        "Build a Task Manager app with login, a dashboard and Stripe billing"
    )

    assert config.name == "task-manager"
    assert config.type == "nextjs"
    assert config.backend is False
    assert config.features == ["auth", "payments", "analytics"]


def test_project_name_defaults_when_absent() -> None:
    assert PromptEnhancer.extract_project_name("something vague") == "my-app"
    assert PromptEnhancer.extract_project_name("make a chat platform") == "chat"
