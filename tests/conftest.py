"""Pytest configuration and shared fixtures for the monomd test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os
from pathlib import Path
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import cleanup_test_dir, create_test_temp_dir

from monomd.context import RenderContext, sequential_ids
from monomd.options import MonoMdOptions

# Hypothesis profiles; pick one with HYPOTHESIS_PROFILE=ci|dev|debug
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by hypothesis")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files.

    Yields
    ------
    Path
        Temporary directory path that will be cleaned up after test.

    """
    temp_path = create_test_temp_dir()
    try:
        yield temp_path
    finally:
        cleanup_test_dir(temp_path)


@pytest.fixture
def context() -> RenderContext:
    """Provide a fresh render context with default options."""
    return RenderContext(options=MonoMdOptions(), id_factory=sequential_ids("cb"))


@pytest.fixture
def sample_markdown() -> str:
    """Provide a document touching every construct of the dialect.

    Returns
    -------
    str
        Sample markup used across multiple tests.

    """
    return """# Release Notes

Welcome to **MonoMD** with __underline__, ~~strike~~ and `inline code`.

> Quoted text
> > Nested quote

- Feature one
  1. detail a
  2. detail b
- [x] Shipped
- [ ] Pending

```python
print("hello")
:::output
hello
:::
```

![Diagram](images/diagram.png)

See !!the guide!!(docs/guide.md) or [the site](https://example.com).

:::warn
Mind the gap.
:::

| Name | Score |[Results]
|------|:-----:|
| Ann  | 12    |
"""
