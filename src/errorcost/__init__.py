"""
errorcost - Cost of Error Signaling Styles

Microbenchmark comparing three ways to signal that a looked-up user
does not exist: raising an exception, returning None, and a try-get
call returning a found flag.

Main APIs:
- UserService: read-only store with the three lookup variants
- ec.run_benchmark(): time all three variants against the baseline
- ec.configure() / ec.load_config(): benchmark settings
"""

__version__ = "0.1.0"

from errorcost.exceptions import (
    ConfigurationError,
    DuplicateUserError,
    ErrorCostError,
    UserNotFoundError,
)
from errorcost.models import (
    TryGetResult,
    User,
)
from errorcost.service import UserService
from errorcost.config import (
    ConfigLoader,
    ErrorCostConfig,
    configure,
    get_config,
    load_config,
)
from errorcost.benchmark import (
    BenchmarkConfig,
    ErrorSignalingBenchmark,
    SuiteResult,
    run_suite,
)


def run_benchmark(
    service: UserService | None = None,
    config: ErrorCostConfig | None = None,
) -> SuiteResult:
    """Benchmark the three lookup variants on a missing user.

    Args:
        service: Service to query (benchmark store if None).
        config: Settings to use (global configuration if None).

    Returns:
        SuiteResult ordered fastest to slowest, relative to the
        None-returning baseline.

    Example:
        import errorcost as ec

        ec.configure(timed_iters=100)
        print(ec.run_benchmark().summary())
    """
    if config is None:
        config = get_config()

    bench = ErrorSignalingBenchmark(service)
    return run_suite(bench.cases(), config.to_benchmark_config())


__all__ = [
    "__version__",
    # Exceptions
    "ErrorCostError",
    "UserNotFoundError",
    "DuplicateUserError",
    "ConfigurationError",
    # Lookup
    "User",
    "TryGetResult",
    "UserService",
    # Config
    "ErrorCostConfig",
    "ConfigLoader",
    "configure",
    "get_config",
    "load_config",
    # Benchmark
    "BenchmarkConfig",
    "ErrorSignalingBenchmark",
    "SuiteResult",
    "run_suite",
    "run_benchmark",
]
