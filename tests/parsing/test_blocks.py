"""Tests for fenced block extraction."""

from __future__ import annotations

from scaffoldgen.parsing.blocks import extract_blocks
from tests._fixtures.completion_builder import CompletionBuilder


def test_extract_blocks_preserves_order_and_headers(completion: CompletionBuilder) -> None:
    text = (
        completion.prose("Here you go:")
        .block("app/page.tsx", "export default function Page() {}")
        .prose("And some styles")
        .block("css", "body { margin: 0; }")
        .block(None, "plain text")
        .text()
    )

    blocks = extract_blocks(text)

    assert [block.header for block in blocks] == ["app/page.tsx", "css", None]
    assert [block.order for block in blocks] == [0, 1, 2]
    assert blocks[0].body == "export default function Page() {}"
    assert blocks[2].body == "plain text"


def test_extract_blocks_trims_and_skips_empty_bodies() -> None:
    text = "```ts\n\n   \n```\n```js\n\n  const a = 1;  \n\n```"

    blocks = extract_blocks(text)

    assert len(blocks) == 1
    assert blocks[0].header == "js"
    assert blocks[0].body == "const a = 1;"
    assert blocks[0].order == 0


def test_extract_blocks_handles_windows_line_endings() -> None:
    text = "```python\r\nprint('hi')\r\n```\r\n"

    blocks = extract_blocks(text)

    assert blocks[0].header == "python"
    assert blocks[0].body == "print('hi')"


def test_extract_blocks_header_must_end_the_fence_line() -> None:
    blocks = extract_blocks("```tsx title\nconst x = 1;\n```")

    assert blocks[0].header is None
    assert blocks[0].body.startswith("tsx title")


def test_extract_blocks_first_closing_fence_wins() -> None:
    text = "```md\nouter\n```inner```\n```"

    blocks = extract_blocks(text)

    assert blocks[0].body == "outer"


def test_extract_blocks_without_fences_returns_nothing() -> None:
    assert extract_blocks("Just prose, no code.") == []
    assert extract_blocks("") == []
    assert extract_blocks("``` unterminated") == []
