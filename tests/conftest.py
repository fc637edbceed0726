"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import models...' works.
"""
import sys
from pathlib import Path

import pytest

repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def table_path(tmp_path):
    """Path to a table file that does not exist yet."""
    return tmp_path / "table.csv"


@pytest.fixture
def people_path(tmp_path):
    """Path to a small, well-formed table already on disk."""
    path = tmp_path / "people.csv"
    path.write_text("name,age\nAnn,30\nBob,41\n", encoding="utf-8")
    return path
