"""Call-site capture for constructed errors."""

from __future__ import annotations

import inspect
from dataclasses import dataclass

from errfmt.core.config import get_config
from errfmt.fmt.protocols import ErrorPrinter

__all__ = ["Frame"]


@dataclass(frozen=True, slots=True)
class Frame:
    """A call site, recorded when an error is constructed.

    Only the location is kept, not the interpreter frame, so holding an
    error does not keep the caller's locals alive. An empty Frame (the
    default) renders nothing.
    """

    function: str = ""
    file: str = ""
    line: int = 0

    @classmethod
    def caller(cls, skip: int = 0) -> Frame:
        """Capture the call site `skip` levels above the caller.

        `Frame.caller(0)` is the function calling `caller`, `Frame.caller(1)`
        its caller, and so on. Returns an empty Frame when the stack is not
        that deep or frame capture is disabled in the configuration.
        """
        if not get_config().capture_frames:
            return cls()

        frame = inspect.currentframe()
        try:
            for _ in range(skip + 1):
                if frame is None:
                    break
                frame = frame.f_back
            if frame is None:
                return cls()
            code = frame.f_code
            module = frame.f_globals.get("__name__", "?")
            return cls(
                function=f"{module}.{code.co_qualname}",
                file=code.co_filename,
                line=frame.f_lineno,
            )
        finally:
            del frame

    def __bool__(self) -> bool:
        return bool(self.function or self.file)

    def location(self) -> tuple[str, str, int]:
        return self.function, self.file, self.line

    def format(self, printer: ErrorPrinter) -> None:
        """Print the location as detail text.

            module.function
                /path/to/file.py:42
        """
        if not self:
            return
        if printer.detail():
            function, file, line = self.location()
            if function:
                printer.printf("%s\n    ", function)
            if file:
                printer.printf("%s:%d", file, line)
