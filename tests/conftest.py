"""Pytest configuration and shared fixtures for the runmark test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from runmark.runs import AttributeSet, Run

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def sample_markdown() -> str:
    """Provide a document covering every supported block kind.

    Returns
    -------
    str
        Canonical Markdown that round-trips unchanged.

    """
    return """# Sample Document

This is a **sample document** with *italic text* and some `inline code`.

## Lists

- Item 1
- Item 2

1. First item
2. Second item

> Quoted text
> > Nested quote

```python
def hello_world():
    print("Hello, World!")
```

A [link](https://example.com) and ~~struck~~ words.
"""


@pytest.fixture
def paragraph_runs() -> list[Run]:
    """Provide runs for two plain paragraphs followed by a final newline.

    Returns
    -------
    list of Run
        Runs as rendered from ``"First\\n\\nSecond\\n"``.

    """
    return [
        Run("First", AttributeSet(paragraph_id=1)),
        Run("Second", AttributeSet(paragraph_id=2)),
        Run("\n"),
    ]
