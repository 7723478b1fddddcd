"""
tmux.py

Thin invocation layer: one tmux command per call, issued through libtmux's
Server.cmd so socket selection (-L) is handled the same way libtmux does it.
"""

from __future__ import annotations

from typing import Optional

import libtmux
from libtmux import exc as tmux_exc

from .errors import ExternalCommandError


def tmux_server(socket_name: Optional[str] = None) -> libtmux.Server:
    """! @brief Create a libtmux Server object.

    @param socket_name Named tmux socket (tmux -L); None for the default server.
    @return libtmux.Server bound to that socket.
    """
    if socket_name:
        return libtmux.Server(socket_name=socket_name)
    return libtmux.Server()


class TmuxRunner:
    """! @brief Run tmux commands synchronously, failing loudly.

    @param server libtmux server the commands are sent to.
    """

    def __init__(self, server: libtmux.Server) -> None:
        self.server = server

    def run(self, step: str, *args: str) -> None:
        """! @brief Run one tmux command and wait for it to exit.

        @param step Logical step name used in the error if the command fails.
        @param args tmux arguments, e.g. ("send-keys", "-t", "s:0.0", "ls", "C-m").
        @throws ExternalCommandError if tmux is missing, cannot be executed or exits non-zero.
        """
        try:
            proc = self.server.cmd(*args)
        except (tmux_exc.TmuxCommandNotFound, OSError) as e:
            raise ExternalCommandError(step, args, stderr=[str(e) or "tmux not found"]) from e

        if proc.returncode != 0:
            raise ExternalCommandError(step, args, returncode=proc.returncode, stderr=proc.stderr)
