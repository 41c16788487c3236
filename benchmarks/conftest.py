"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_document() -> str:
    """Generate a large component template (~150KB)."""
    sections = []
    for i in range(500):
        sections.append(f"""
<cat-section id="section-{i}" data-index="{i}">
  <!-- section {i} -->
  <h2>Section {i}</h2>
  <p>Paragraph {i} with <em>inline</em> markup and <a href="/{i}">a link</a>.</p>
  <cat-list items="{i}"></cat-list>
</cat-section>
""")
    return (
        "<!DOCTYPE html>\n<document>\n<head>\n<title>Bench</title>\n</head>\n<body>"
        + "".join(sections)
        + "</body>\n</document>\n"
    )


@pytest.fixture
def content_heavy_document() -> str:
    """Long text with few tags."""
    return ("Lorem ipsum dolor sit amet, consectetur adipiscing elit. " * 2000) + "<cat-footer>"
