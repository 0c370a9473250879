"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_document() -> str:
    """Generate a large markdown document (~60KB)."""
    sections = []
    for i in range(200):
        sections.append(
            f"# Section {i}\r\n"
            "\r\n"
            f"This is paragraph {i} with a hard break  \r\n"
            "and a second line that continues it.\r\n"
            "\r\n"
            "- List item 1\r\n"
            "- List item 2\r\n"
            "* List item 3\r\n"
            "\r\n"
            f"Subsection {i}\r\n"
            "------------\r\n"
            "\r\n"
            "***\r\n"
        )
    return "".join(sections)


@pytest.fixture
def real_world_docs() -> list[str]:
    """Collection of common block patterns."""
    return [
        "Hello world!",
        "# Title\r\n\r\nThis is a paragraph.\r\n\r\n## Subtitle\r\n\r\nMore content here.\r\n",
        "Setext Title\r\n============\r\n\r\nBody text.\r\n",
        "- one\r\n- two\r\n+ three\r\n* four\r\n",
        "line one  \r\nline two  \r\nline three\r\n",
        "---\r\n***\r\n- - -\r\n",
    ]
