"""Dispatch error types for the YACL command pipeline."""
from __future__ import annotations

from dataclasses import dataclass, field

from yacl.yacl_modules.types import ExitCode


@dataclass(frozen=True)
class DispatchError:
    """Structured error for a terminal dispatch failure.

    exit_code is the value the process terminates with when
    the error reaches Dispatcher.start().
    """

    step_name: str
    error_type: str
    message: str
    exit_code: ExitCode
    context: dict[str, object] = field(default_factory=dict)

    def __str__(self) -> str:
        """Human-readable error representation."""
        max_len = 500
        base = (
            f"DispatchError[{self.step_name}] {self.error_type}"
            f" (exit {int(self.exit_code)}): {self.message}"
        )
        if self.context:
            ctx_str = str(self.context)
            if len(ctx_str) > max_len:
                ctx_str = ctx_str[: max_len - 3] + "..."
            base += f" | context={ctx_str}"
        return base
