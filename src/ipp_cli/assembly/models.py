"""Data models for fragment assembly."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from .constants import ENCODING, MARKER_TEMPLATE


class StepStatus(Enum):
    """Outcome of a single fragment pass."""
    SPLICED = "spliced"
    SKIPPED = "skipped"


class SkipReason(Enum):
    """Why a fragment pass left the buffer unchanged."""
    MARKER_NOT_FOUND = "marker_not_found"
    FRAGMENT_MISSING = "fragment_missing"


@dataclass
class Fragment:
    """A named fragment: the marker to replace and the file that replaces it."""
    name: str
    path: Path
    marker: Optional[str] = None

    def __post_init__(self):
        self.path = Path(self.path)
        if self.marker is None:
            self.marker = MARKER_TEMPLATE.format(name=self.name)

    @property
    def marker_bytes(self) -> bytes:
        return self.marker.encode(ENCODING)


@dataclass
class StepOutcome:
    """Record of what one pass did to the source buffer."""
    fragment: Fragment
    status: StepStatus
    reason: Optional[SkipReason] = None
    start: int = -1
    end: int = -1
    replacement_length: int = 0
    header_stripped: bool = False

    @property
    def spliced(self) -> bool:
        return self.status == StepStatus.SPLICED

    @classmethod
    def skipped(cls, fragment: Fragment, reason: SkipReason) -> "StepOutcome":
        return cls(fragment=fragment, status=StepStatus.SKIPPED, reason=reason)


@dataclass
class AssemblyResult:
    """Result of assembling a primary file."""
    content: bytes
    input_length: int
    output_path: Optional[Path] = None
    written: bool = False
    steps: List[StepOutcome] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def output_length(self) -> int:
        return len(self.content)

    @property
    def spliced(self) -> List[StepOutcome]:
        return [s for s in self.steps if s.spliced]

    @property
    def skipped(self) -> List[StepOutcome]:
        return [s for s in self.steps if not s.spliced]
