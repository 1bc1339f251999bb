"""Process invocation descriptors.

An Invocation describes one external command; a CommandResult is what a
capture-mode run hands back. Both live only for the duration of a call.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List

# Secrets that appear inline in argv: client flags, injected env vars and
# the password literal of a CREATE USER statement
_SECRET_PATTERNS = [
    re.compile(r"^(--password=).+$"),
    re.compile(r"^(MYSQL_[A-Z_]*PASSWORD=).+$"),
    re.compile(r"(identified by ')[^']*(?=')", re.IGNORECASE),
]
_MASK = "****"


@dataclass
class Invocation:
    """One external command to run.

    ``stream`` selects inherit mode: the child writes straight to our
    stdout/stderr instead of having its output captured.
    """

    executable: str
    args: List[str] = field(default_factory=list)
    env: Dict[str, str] = field(default_factory=dict)
    stream: bool = False

    @property
    def argv(self) -> List[str]:
        """Full argument vector, executable first."""
        return [self.executable, *self.args]

    def masked_argv(self) -> List[str]:
        """Argument vector safe for logging."""
        masked = []
        for arg in self.argv:
            for pattern in _SECRET_PATTERNS:
                arg = pattern.sub(lambda m: m.group(1) + _MASK, arg)
            masked.append(arg)
        return masked


@dataclass
class CommandResult:
    """Exit status and decoded output of a finished command."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0
