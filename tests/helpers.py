"""Test doubles shared across sesh tests."""

from __future__ import annotations

from typing import List, Optional, Tuple

from sesh.errors import ExternalCommandError


class RecordingRunner:
    """Records tmux calls instead of running them; optionally fails on the n-th call."""

    def __init__(self, fail_at: Optional[int] = None, stderr: Optional[List[str]] = None) -> None:
        self.calls: List[Tuple[str, ...]] = []
        self.steps: List[str] = []
        self.fail_at = fail_at
        self.stderr = stderr or ["boom"]

    def run(self, step: str, *args: str) -> None:
        if self.fail_at is not None and len(self.calls) == self.fail_at:
            raise ExternalCommandError(step, args, returncode=1, stderr=self.stderr)
        self.calls.append(args)
        self.steps.append(step)

    def verbs(self) -> List[str]:
        return [c[0] for c in self.calls]
