import threading

from movie_catalog.domain.ports.services.logger import LoggerPort


class CallBudget:
    """Hard cap on the number of external API calls made during one run.

    ``try_consume`` checks and increments the counter in a single critical
    section, so the limit holds even if callers share it across threads.
    """

    def __init__(self, max_calls: int, logger: LoggerPort):
        if max_calls < 0:
            raise ValueError("max_calls must not be negative")
        self.max_calls = max_calls
        self.logger = logger
        self._used = 0
        self._limit_logged = False
        self._lock = threading.Lock()

    def try_consume(self) -> bool:
        with self._lock:
            if self._used >= self.max_calls:
                if not self._limit_logged:
                    self._limit_logged = True
                    self.logger.warning(
                        "External API call limit of %d reached. Skipping further requests.", self.max_calls
                    )
                return False
            self._used += 1
            return True

    @property
    def used(self) -> int:
        with self._lock:
            return self._used

    @property
    def exhausted(self) -> bool:
        with self._lock:
            return self._used >= self.max_calls
