"""
Core data models for pathbrowser.

These dataclasses define the structured data passed between:
- directory layer -> file system (stat results)
- system -> CLI (command results)
- browser -> scanner -> logger / console (lookup traces)

They are small, immutable containers with no heavy logic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

# ---------------------------------------------------------------------------
# Directory layer
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FileStat:
    """
    Metadata of a single path as reported by a Directory.

    - size         (bytes)
    - mtime        (POSIX timestamp, whole seconds)
    - permissions  (mode bits, e.g. 0o644; may include type bits)
    """

    size: int
    mtime: int
    permissions: int

# ---------------------------------------------------------------------------
# Command execution
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of running a command or a generated multi-command script.

    `output` holds stdout split in lines with trailing whitespace removed,
    `code` is the exit status of the command (or of the script).
    """

    output: List[str] = field(default_factory=list)
    code: int = 0

# ---------------------------------------------------------------------------
# Lookup tracing
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LookupRecord:
    """
    Represents the outcome of probing one include directory for a name.

    - name      the relative name that was looked up
    - root      absolute path of the include directory
    - path      path of the candidate child
    - found     whether the candidate exists
    - shadowed  True when the candidate exists but an earlier include
                directory already provided a match
    """

    name: str
    root: str
    path: str
    found: bool
    shadowed: bool = False
