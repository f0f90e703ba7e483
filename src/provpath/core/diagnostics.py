"""Logging sink used by the engine."""

import logging

ENGINE_LOGGER_NAME = "provpath"


class DiagnosticSink:
    """Wraps an injected logger so that a failing handler never aborts resolution"""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger if logger is not None else logging.getLogger(ENGINE_LOGGER_NAME)

    def debug(self, message: str, *args: object, code: str | None = None) -> None:
        self._emit(logging.DEBUG, message, args, code)

    def info(self, message: str, *args: object, code: str | None = None) -> None:
        self._emit(logging.INFO, message, args, code)

    def warning(self, message: str, *args: object, code: str | None = None) -> None:
        self._emit(logging.WARNING, message, args, code)

    def _emit(self, level: int, message: str, args: tuple[object, ...], code: str | None) -> None:
        extra = {"error_code": code} if code else None
        try:
            self.logger.log(level, message, *args, extra=extra)
        except Exception:  # noqa: BLE001 - diagnostics are best-effort
            return
