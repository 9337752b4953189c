import sys
from pathlib import Path
import importlib
import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture()
def m():
    """Lazily import the main module for tests to avoid module-level import."""
    return importlib.import_module("main")


@pytest.fixture()
def small_code():
    """Code built from ``"aaabbc"``: a=0, c=10, b=11."""
    from coder import HuffmanCode

    return HuffmanCode.from_text("aaabbc")


def is_prefix_free(codes):
    """Return ``True`` if no code in ``codes`` is a prefix of another."""
    values = sorted(codes.values())
    return all(
        not values[i + 1].startswith(values[i])
        for i in range(len(values) - 1)
    )


@pytest.fixture()
def prefix_free_fn():
    """
    Fixture that provides the is_prefix_free helper without importing conftest.
    """
    return is_prefix_free
