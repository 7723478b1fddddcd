"""
errors.py

Failures a `sesh` run can end with. Every layer raises one of these and lets
it propagate; only the CLI decides how to report it and which exit code to use.
"""

from __future__ import annotations

from typing import List, Optional, Sequence


class SeshError(Exception):
    """Base class for every error surfaced by sesh."""


class InputError(SeshError):
    """The spec file could not be opened or read."""


class ParseError(SeshError):
    """The spec document is not valid YAML or does not have the expected shape."""


class InvalidSpec(SeshError):
    """The spec parsed fine but cannot be realized (no windows, a window without panes, ...)."""


class ExternalCommandError(SeshError):
    """! @brief A tmux invocation exited non-zero or could not be started.

    @param step Logical build step that failed, e.g. "create session" or
           "split pane in window dev".
    @param tmux_args tmux arguments of the failed call (without the "tmux" prefix).
    @param returncode tmux exit status, None if the process never ran.
    @param stderr Lines tmux wrote to its error stream.
    """

    def __init__(
        self,
        step: str,
        tmux_args: Sequence[str],
        returncode: Optional[int] = None,
        stderr: Optional[List[str]] = None,
    ) -> None:
        self.step = step
        self.tmux_args = list(tmux_args)
        self.returncode = returncode
        self.stderr = list(stderr or [])
        super().__init__(f"failed to {step}: {self.cause}")

    @property
    def cause(self) -> str:
        diagnostic = " ".join(line.strip() for line in self.stderr if line.strip())
        if diagnostic:
            return diagnostic
        if self.returncode is None:
            return "tmux could not be started"
        return f"tmux exited with status {self.returncode}"
