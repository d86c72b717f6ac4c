"""Terminal styling, status messages and a progress spinner."""

from __future__ import annotations

import itertools
import os
import sys
import threading

_RESET = "\x1b[0m"
_CLEAR_LINE = "\r\x1b[2K"
_SPINNER_FRAMES = "⠁⠂⠄⡀⢀⠠⠐⠈"
_TICK_SECONDS = 0.1


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _colors_enabled() -> bool:
    if os.environ.get("CLICOLOR_FORCE", "0") != "0":
        return True
    if "NO_COLOR" in os.environ:
        return False
    return sys.stdout.isatty()


def _style(text: object, code: str) -> str:
    text = str(text)
    if not _colors_enabled():
        return text
    return f"\x1b[{code}m{text}{_RESET}"


def bold(text: object) -> str:
    """Render text in bold."""
    return _style(text, "1")


def red(text: object) -> str:
    """Render text in red."""
    return _style(text, "31")


def green(text: object) -> str:
    """Render text in green."""
    return _style(text, "32")


def blue(text: object) -> str:
    """Render text in blue."""
    return _style(text, "34")


def warn(message: str) -> None:
    """Print a warning line in red."""
    marker = "!" if no_emoji() else "⚠️ "
    print(f"{red(marker)} {red(message)}")


def success(message: str) -> None:
    """Print a success line in green."""
    marker = "✓" if no_emoji() else "✅"
    print(f"{green(marker)} {green(message)}")


class Spinner:
    """A spinner with a message, drawn on stderr while it is a terminal."""

    def __init__(self, message: str) -> None:
        self.message = message
        self._stream = sys.stderr
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        if self._stream.isatty():
            self._thread = threading.Thread(target=self._spin, daemon=True)
            self._thread.start()

    def _spin(self) -> None:
        for frame in itertools.cycle(_SPINNER_FRAMES):
            with self._lock:
                self._stream.write(f"{_CLEAR_LINE}{frame} {self.message}")
                self._stream.flush()
            if self._stop.wait(_TICK_SECONDS):
                break

    def set_message(self, message: str) -> None:
        """Replace the message shown next to the spinner."""
        with self._lock:
            self.message = message

    def finish_and_clear(self) -> None:
        """Stop the spinner and erase its line."""
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        self._thread = None
        with self._lock:
            self._stream.write(_CLEAR_LINE)
            self._stream.flush()

    def __enter__(self) -> Spinner:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.finish_and_clear()