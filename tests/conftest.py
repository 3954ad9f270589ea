"""
PyTest Configuration for errorcost Tests

Provides fixtures, markers, and test setup.
"""
import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture
def some_user():
    """The user stored by the sample service."""
    from errorcost.models import User
    return User(id="some-user", name="User!")


@pytest.fixture
def service(some_user):
    """Service holding a single known user."""
    from errorcost.service import UserService
    return UserService([some_user])


@pytest.fixture
def fast_config():
    """Harness configuration small enough for unit tests."""
    from errorcost.benchmark import BenchmarkConfig
    return BenchmarkConfig(warmup_iters=1, timed_iters=5, inner_iters=10)
