"""Shared fixtures for the Cortado test suite."""

from collections.abc import Iterator

import pytest

from cortado import StringTokenizer, reset_tokenizer_config


@pytest.fixture(autouse=True)
def _isolate_default_config() -> Iterator[None]:
    """Keep default-config changes from leaking between tests."""
    reset_tokenizer_config()
    yield
    reset_tokenizer_config()


@pytest.fixture
def semicolon_tokenizer() -> StringTokenizer:
    """Semicolon-delimited, double-quoted input with padded and empty fields."""
    return StringTokenizer('a;b; c;"d;""e";f; ; ;', ";", '"').set_ignore_empty_tokens(False)
