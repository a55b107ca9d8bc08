from __future__ import annotations

import logging
import shlex
import subprocess
from contextlib import suppress
from typing import TYPE_CHECKING, TextIO

from ..engine.errors import PlayerLaunchError, ProtocolViolation
from ..models.enums import PlayerState
from . import protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..models.api import Arrangement, MoveInstruction
    from ..models.units import UnitStatus

logger = logging.getLogger(__name__)


class ProtocolPlayer:
    """Decision process reached through a pair of text streams.

    Starts ARRANGEMENT_PENDING; reading the arrangement moves it to READY.
    Every think call writes one request and blocks until the full response
    has been read. There is no timeout.
    """

    def __init__(
        self,
        reader: TextIO,
        writer: TextIO,
        *,
        name: str = "stream",
        proc: subprocess.Popen | None = None,
    ):
        self.reader = reader
        self.writer = writer
        self.name = name
        self.proc = proc
        self.state = PlayerState.ARRANGEMENT_PENDING
        self._arrangement: Arrangement | None = None

    @classmethod
    def spawn(cls, command: str | Sequence[str]) -> ProtocolPlayer:
        args = shlex.split(command) if isinstance(command, str) else list(command)
        try:
            proc = subprocess.Popen(
                args,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                text=True,
                bufsize=1,
            )
        except OSError as e:
            raise PlayerLaunchError(args, e) from e
        logger.info("spawned decision process %s (pid=%s)", args, proc.pid)
        return cls(proc.stdout, proc.stdin, name=" ".join(args), proc=proc)

    def build_initial_arrangement(self) -> Arrangement:
        if self._arrangement is None:
            self._arrangement = protocol.decode_arrangement(self.reader)
            self.state = PlayerState.READY
            logger.debug("%s: arrangement with %d units", self.name, self._arrangement.total)
        return self._arrangement

    def think(
        self, self_units: Sequence[UnitStatus], enemy_units: Sequence[UnitStatus]
    ) -> list[MoveInstruction]:
        if self.state != PlayerState.READY:
            raise ProtocolViolation(f"{self.name}: think requested before the initial arrangement")
        self._send(protocol.encode_think_request(self_units, enemy_units))
        return protocol.decode_think_response(self.reader)

    def _send(self, text: str) -> None:
        try:
            self.writer.write(text)
            self.writer.flush()
        except BrokenPipeError:
            raise ProtocolViolation(f"{self.name}: decision process stopped reading") from None

    def close(self) -> None:
        if self.proc is None:
            return
        proc, self.proc = self.proc, None
        for stream in (proc.stdin, proc.stdout):
            if stream is None:
                continue
            with suppress(BrokenPipeError):
                stream.close()
        try:
            proc.wait(timeout=5)
        except subprocess.TimeoutExpired:
            proc.kill()
            proc.wait()
        logger.debug("%s exited with %s", self.name, proc.returncode)
