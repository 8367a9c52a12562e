"""Request timing on top of stdlib logging."""

import logging
import time


class Timer:
    """A running timer; :meth:`done` logs the message with the elapsed time."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger
        self._start = time.perf_counter()
        self.duration_ms: float | None = None

    def done(self, message: object = None, level: int = logging.INFO) -> float:
        """Stop the timer and log ``message`` at ``level``.

        Returns:
            Elapsed time in milliseconds
        """
        self.duration_ms = (time.perf_counter() - self._start) * 1000
        self._logger.log(level, "%s (%.2f ms)", message, self.duration_ms)
        return self.duration_ms


class Profiler:
    """Logger collaborator for the API client.

    Args:
        name: Logger name.
        level: Optional level applied to the logger.
    """

    def __init__(self, name: str, level: int | str | None = None) -> None:
        self.logger = logging.getLogger(name)
        if level is not None:
            self.logger.setLevel(level)

    def start_timer(self) -> Timer:
        return Timer(self.logger)

    def info(self, message: str) -> None:
        self.logger.info(message)
