"""Unmet peer dependency detection in npm install output.

npm 2/3 print a dependency tree after installing, flagging peers that are
required but absent:

    /project
    ├── redbox-react@1.2.3
    └── UNMET PEER DEPENDENCY react@>=0.13.2 || ^0.14.0-rc1 || ^15.0.0-rc

This is the only part of npm's output autoinstall understands. Lines that
look similar but do not carry both a name and a range are ignored.
"""

import re

from .models import PeerWarning

# Scoped names keep their leading "@", so the separator is the first "@"
# after the name's first character. The range runs to end of line.
PEER_PATTERN = re.compile(r"UNMET PEER DEPENDENCY (@?[^@\s]+)@(\S.*?)\s*$")


def parse_peer_warnings(output: str | bytes | None) -> list[PeerWarning]:
    """Return the peer warnings in output, in the order they appear."""
    if not output:
        return []
    if isinstance(output, bytes):
        output = output.decode(errors="replace")

    warnings = []
    for line in output.splitlines():
        match = PEER_PATTERN.search(line)
        if match:
            warnings.append(PeerWarning(name=match.group(1), version_range=match.group(2)))
    return warnings


__all__ = ["PEER_PATTERN", "parse_peer_warnings"]
