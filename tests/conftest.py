"""Global pytest fixtures and default marks for awesomelib."""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

pytest_plugins = [
    "tests.fixtures.clocks",
    "tests.fixtures.scheduling",
]

TESTS_ROOT = Path(__file__).parent.resolve()

# top-level test directory -> marker applied to every test collected inside it
DIRECTORY_MARKERS = {
    "unit": "unit",
    "contract": "contract",
    "functional": "functional",
    "property": "property",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark each item after the top-level directory it lives in."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        if TESTS_ROOT not in path.parents:
            continue
        top = path.relative_to(TESTS_ROOT).parts[0]
        marker_name = DIRECTORY_MARKERS.get(top)
        if marker_name is None:
            continue
        if not any(marker.name == marker_name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker_name))
