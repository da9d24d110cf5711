"""Benchmark fixtures and configuration."""

from __future__ import annotations

import random

import pytest


@pytest.fixture
def large_csv() -> str:
    """Generate a large CSV document (~200KB) with quoted and padded fields."""
    rng = random.Random(42)
    rows = []
    for i in range(2000):
        rows.append(
            ",".join(
                [
                    str(i),
                    f'"name {i}, with comma"',
                    f"  padded {rng.randint(0, 9999)}  ",
                    "",
                    f'"say ""hi"" {i}"',
                    f"{rng.random():.6f}",
                ]
            )
        )
    return "\n".join(rows)


@pytest.fixture
def large_words() -> str:
    """Generate whitespace-separated text (~500KB)."""
    rng = random.Random(7)
    vocabulary = ["alpha", "beta", "gamma", "delta", "epsilon", "zeta", "eta", "theta"]
    return " ".join(rng.choice(vocabulary) for _ in range(80_000))


@pytest.fixture
def real_world_lines() -> list[str]:
    """Collection of short, realistic inputs."""
    return [
        "GET /index.html HTTP/1.1",
        'key="some value" other=plain flag',
        "a;b; c;\"d;\"\"e\";f; ; ;",
        "2024-01-01T00:00:00Z\tINFO\tservice started\tpid=1234",
        "  leading and trailing whitespace  ",
        "x" * 200,
    ]
