"""Integration tests need a migrated Postgres.

Point ``DATABASE__URL`` at it (``alembic upgrade head`` first); without it
the integration suite is skipped.
"""

import os

import pytest


def pytest_collection_modifyitems(config, items):
    if os.environ.get("DATABASE__URL"):
        return
    skip = pytest.mark.skip(reason="DATABASE__URL not set")
    for item in items:
        if "integration" in item.path.parts:
            item.add_marker(skip)
