"""
builder.py

Turn a SessionSpecification into the ordered tmux calls that realize it.

Window 0 comes with `new-session`, pane 0 of every window comes with its
window. Everything after that is created explicitly (`new-window`,
`split-window`) before it is addressed. Targets are recomputed from the walk
position so they always match the order things were created in.

The build stops at the first failing call. Whatever was created up to that
point is left in place.
"""

from __future__ import annotations

import shlex
import sys
from dataclasses import dataclass
from typing import Optional, Protocol, TextIO

from .errors import InvalidSpec
from .spec import Pane, SessionSpecification


class Runner(Protocol):
    def run(self, step: str, *args: str) -> None: ...


@dataclass(frozen=True)
class BuilderConfig:
    verbose: bool = False
    split_flag: str = "-h"
    send_empty: bool = True


def window_target(session: str, window_index: int) -> str:
    return f"{session}:{window_index}"


def pane_target(session: str, window_index: int, pane_index: int) -> str:
    return f"{window_target(session, window_index)}.{pane_index}"


def compose_command(pane: Pane) -> str:
    """! @brief Text typed into a pane.

    `cd <path> && <command>` when the pane has a path, the bare command otherwise.
    Nothing is quoted; the spec author owns shell safety.
    """
    if pane.path:
        return f"cd {pane.path} && {pane.command}"
    return pane.command


def validate(spec: SessionSpecification) -> None:
    """! @brief Reject specs that cannot be built, before any tmux call is made.

    @throws InvalidSpec on an empty session name, no windows, or a window without panes.
    """
    if not spec.session:
        raise InvalidSpec("invalid spec: session name is empty")
    if not spec.windows:
        raise InvalidSpec(f"invalid spec: session {spec.session!r} has no windows")
    for i, w in enumerate(spec.windows):
        if not w.panes:
            raise InvalidSpec(f"invalid spec: window {i} ({w.name!r}) has no panes")


class SessionBuilder:
    """! @brief Walk a spec and issue tmux commands in order.

    @param runner Object with run(step, *args) that executes one tmux command
           and raises ExternalCommandError on failure.
    @param config Builder options.
    @param out Stream for the verbose echo (stdout by default).
    """

    def __init__(self, runner: Runner, config: BuilderConfig = BuilderConfig(), out: Optional[TextIO] = None) -> None:
        self.runner = runner
        self.config = config
        self.out = out

    def _run(self, step: str, *args: str) -> None:
        if self.config.verbose:
            print("tmux " + " ".join(shlex.quote(a) for a in args), file=self.out or sys.stdout)
        self.runner.run(step, *args)

    def build(self, spec: SessionSpecification) -> None:
        validate(spec)
        session = spec.session

        self._run("create session", "new-session", "-d", "-s", session, "-n", spec.windows[0].name)

        for i, w in enumerate(spec.windows):
            target = window_target(session, i)
            if i != 0:
                self._run(f"create window {w.name}", "new-window", "-t", session, "-n", w.name)

            for j, p in enumerate(w.panes):
                if j != 0:
                    split = ["split-window", "-t", target, self.config.split_flag]
                    if p.path:
                        split += ["-c", p.path]
                    self._run(f"split pane in window {w.name}", *split)

                text = compose_command(p)
                if text or self.config.send_empty:
                    self._run(
                        f"send command to pane in window {w.name}",
                        "send-keys", "-t", pane_target(session, i, j), text, "C-m",
                    )

            if w.layout:
                self._run(f"set layout for window {w.name}", "select-layout", "-t", target, w.layout)
