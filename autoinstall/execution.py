"""Synchronous command execution."""

import logging
import subprocess
from dataclasses import dataclass

from .errors import ProcessFailure

_logging = logging.getLogger(__name__)


@dataclass
class ProcessResult:
    returncode: int
    stdout: bytes | None = None
    stderr: bytes | None = None

    @property
    def output(self) -> str:
        if not self.stdout:
            return ""
        return self.stdout.decode(errors="replace")


class SubprocessRunner:
    """Run external commands in the project root, one at a time.

    With capture=False the child inherits all of our standard streams. With
    capture=True stdout is captured while stdin and stderr stay inherited, so
    interactive prompts and warnings still reach the terminal.
    """

    def __init__(self, cwd=None):
        self.cwd = cwd

    def run(
        self,
        binary: str,
        args: list[str],
        capture: bool = True,
        check: bool = True,
    ) -> ProcessResult:
        command = [binary, *args]
        _logging.debug(f"Running command: {' '.join(command)}")
        try:
            proc = subprocess.run(
                command,
                cwd=self.cwd,
                stdout=subprocess.PIPE if capture else None,
                stderr=subprocess.PIPE if capture and not check else None,
            )
        except OSError as e:
            _logging.error(f"Command execution failed: {type(e).__name__}: {e}")
            raise ProcessFailure(command, None, f"could not be started: {e}") from e

        _logging.debug(f"Return code: {proc.returncode}")
        if check and proc.returncode != 0:
            raise ProcessFailure(command, proc.returncode)

        return ProcessResult(
            returncode=proc.returncode, stdout=proc.stdout, stderr=proc.stderr
        )


__all__ = ["ProcessResult", "SubprocessRunner"]
