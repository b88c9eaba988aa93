"""
Root pytest configuration.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line(
        "markers",
        "critical: Tests that must never fail - core functionality",
    )
    config.addinivalue_line(
        "markers",
        "security: Security-critical tests (matching, malformed input)",
    )
    config.addinivalue_line(
        "markers",
        "property: Property-based tests (may be slow)",
    )


@pytest.fixture(autouse=True)
def reset_diagnostics_cache() -> Generator[None, None, None]:
    """Reset the diagnostics module state around each test.

    The diagnostics module caches the ``internal_logging_enabled`` setting on
    first access, so each test starts from an unresolved cache and the
    default writer.
    """
    import sri_metadata.core.diagnostics as diag

    diag._reset_for_tests()
    yield
    diag._reset_for_tests()


@pytest.fixture
def capture_diagnostics(
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[list[dict[str, object]], None, None]:
    """Enable internal logging and collect emitted diagnostics."""
    import sri_metadata.core.diagnostics as diag

    monkeypatch.setenv("SRI_METADATA_CORE__INTERNAL_LOGGING_ENABLED", "true")
    captured: list[dict[str, object]] = []
    diag.set_writer_for_tests(captured.append)
    yield captured
