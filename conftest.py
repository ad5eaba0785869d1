# Ensure project root is on sys.path so 'irc_syntax' is importable when running
# pytest from environments that don't install the package first.
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

ROOT = Path(__file__).parent.resolve()
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def callback():
    """A Mock standing in for an operation set."""
    return Mock()


@pytest.fixture(autouse=True)
def reset_error_aggregator():
    """Clear aggregated error counts between tests."""
    yield
    from irc_syntax.logging_config import error_aggregator

    error_aggregator.reset()
