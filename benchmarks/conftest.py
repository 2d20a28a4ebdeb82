"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_document() -> str:
    """Generate a large markdown document (~60KB)."""
    sections = []
    for i in range(100):
        sections.append(f"""
# Section {i}

This is paragraph {i} with **bold** and **[a link](https://example.com/{i})**.
It continues on a second line with a version number like 3.{i}.

## Subsection {i}

Here is a [link](https://example.com/{i}) and an unclosed [bracket.
Some **unbalanced stars and ####### hashes stay literal.
""")
    return "\n".join(sections)


@pytest.fixture
def real_world_docs() -> list[str]:
    """Collection of markdown patterns the dialect supports."""
    return [
        # Simple paragraph
        "Hello **world**!",
        # Headers and paragraphs
        """# Title

This is a paragraph with **strong** text.

## Subtitle

More content here.""",
        # Links
        """Check out [our docs](https://docs.example.com) for more info.
Contact us at [the site](https://example.com/contact).""",
        # Degraded delimiters
        """[oops **never closed

####### seven hashes
a # mid-line hash""",
    ]


@pytest.fixture
def pathological_documents() -> dict[str, str]:
    """Paragraphs full of openers that never close."""
    return {
        "open_brackets": "[" * 20000,
        "open_strong": "**a " * 5000,
        "open_links_after_text": "[a](" * 5000,
        "many_digits": "1234567890" * 500,
    }
