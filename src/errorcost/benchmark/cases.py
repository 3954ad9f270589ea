"""
Error Signaling Benchmark Cases

The three measured operations. Each fetches a user that does not exist,
so every call takes the miss path of its lookup variant.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from errorcost.exceptions import ConfigurationError, UserNotFoundError
from errorcost.service import UserService


@dataclass(frozen=True, slots=True)
class BenchmarkCase:
    """A named operation to benchmark.

    Attributes:
        name: Short identifier (e.g., "get_user_with_default").
        description: Human-readable description of what is measured.
        fn: Zero-argument callable to time.
        baseline: Whether other cases are reported relative to this one.
    """

    name: str
    description: str
    fn: Callable[[], Any]
    baseline: bool = False


class ErrorSignalingBenchmark:
    """Benchmarks exceptions vs. default values vs. try-get.

    Example:
        ```python
        bench = ErrorSignalingBenchmark()
        suite = run_suite(bench.cases())
        print(suite.summary())
        ```
    """

    # Never a key in the benchmark store.
    MISSING_USER_ID = ""

    def __init__(self, service: UserService | None = None) -> None:
        """Initialize benchmark.

        Args:
            service: Service to query (benchmark store if None).

        Raises:
            ConfigurationError: If the service stores MISSING_USER_ID,
                which would put every case on the found path.
        """
        if service is None:
            service = UserService.create_for_benchmark()
        elif self.MISSING_USER_ID in service:
            raise ConfigurationError(
                f"Benchmark store must not contain user ID {self.MISSING_USER_ID!r}",
                key="service",
                value=service,
            )

        self._service = service

    @property
    def service(self) -> UserService:
        return self._service

    def get_user_with_exceptions(self) -> bool:
        try:
            return self._service.get_user_or_raise(self.MISSING_USER_ID) is not None
        except UserNotFoundError:
            return False

    def get_user_with_default(self) -> bool:
        return self._service.get_user_or_default(self.MISSING_USER_ID) is not None

    def get_user_with_try_get(self) -> bool:
        found, _ = self._service.try_get_user(self.MISSING_USER_ID)
        return found

    def cases(self) -> list[BenchmarkCase]:
        """Build the benchmark cases.

        Returns:
            The three cases; the default-returning one is the baseline.
        """
        return [
            BenchmarkCase(
                name="get_user_with_exceptions",
                description="Attempts to fetch a non-existent user with the exception-raising method",
                fn=self.get_user_with_exceptions,
            ),
            BenchmarkCase(
                name="get_user_with_default",
                description="Attempts to fetch a non-existent user with the None-returning method",
                fn=self.get_user_with_default,
                baseline=True,
            ),
            BenchmarkCase(
                name="get_user_with_try_get",
                description="Attempts to fetch a non-existent user with the try-get method",
                fn=self.get_user_with_try_get,
            ),
        ]
