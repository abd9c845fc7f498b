"""
Diagnostic output for path-utils.

Every component reports progress and failures through a sink exposing four
leveled calls: ``normal``, ``success``, ``warning`` and ``error``. Output is
advisory only; no result depends on it.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from .constants import DEFAULT_DISPLAY_INFO

logger = logging.getLogger(__name__)


@runtime_checkable
class DiagnosticSink(Protocol):
    """Anything that can receive leveled diagnostic messages."""

    def normal(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class LoggingSink:
    """
    Sink that forwards messages to a standard library logger.

    normal and success go to INFO, warning to WARNING, error to ERROR.
    Empty messages (used as spacers) are dropped.
    """

    def __init__(self, log: Optional[logging.Logger] = None):
        self.logger = log or logging.getLogger("path_utils")

    def normal(self, message: str) -> None:
        if message:
            self.logger.info(message)

    def success(self, message: str) -> None:
        if message:
            self.logger.info(f"✓ {message.strip()}")

    def warning(self, message: str) -> None:
        self.logger.warning(message.strip())

    def error(self, message: str) -> None:
        self.logger.error(message.strip())


class NullSink:
    """Sink that discards everything."""

    def normal(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass


@dataclass
class Options:
    """Options shared by every component: where messages go and whether to emit them."""

    sink: Optional[DiagnosticSink] = None
    display: bool = DEFAULT_DISPLAY_INFO


class Reporter:
    """
    Sink wrapper that drops every call when display is off.

    Without an explicit sink, messages go to a LoggingSink on the
    "path_utils" logger. That logger only carries a NullHandler and does not
    propagate, so the default is silent until configure_logging (or
    setup_logging) attaches a handler to it.
    """

    def __init__(self, sink: Optional[DiagnosticSink] = None, display: bool = DEFAULT_DISPLAY_INFO):
        self.sink = sink if sink is not None else LoggingSink()
        self.display = display

    @classmethod
    def from_options(cls, options: Options) -> "Reporter":
        """Build a reporter from an Options instance."""
        return cls(sink=options.sink, display=options.display)

    def normal(self, message: str) -> None:
        if self.display:
            self._emit("normal", message)

    def success(self, message: str) -> None:
        if self.display:
            self._emit("success", message)

    def warning(self, message: str) -> None:
        if self.display:
            self._emit("warning", message)

    def error(self, message: str) -> None:
        if self.display:
            self._emit("error", message)

    def _emit(self, level: str, message: str) -> None:
        # A broken sink must not change any result
        try:
            getattr(self.sink, level)(message)
        except Exception as e:
            logger.debug(f"Diagnostic sink failed on {level}: {e}")
