"""Fragment assembly: splice fragment files into a primary source file.

Each configured fragment gets exactly one pass over the buffer, in order. A
pass looks for the fragment's marker, loads the fragment file, drops its
leading header token and replaces the marker span with what is left. Missing
markers and missing fragment files skip the pass; they never abort the run.

Later passes scan the buffer produced by earlier ones, so a marker that only
appears inside previously inlined content is still matched by its own pass.
Nothing is expanded more than once since every fragment has a single pass.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from .buffer_editor import replace_range
from .constants import HEADER_TOKEN
from .header import strip_leading_header
from .models import AssemblyResult, Fragment, SkipReason, StepOutcome, StepStatus


class Assembler:
    """Inline an ordered list of fragments into a source buffer."""

    def __init__(self, fragments: Iterable[Fragment], header_token: str = HEADER_TOKEN):
        """Initialize the assembler.

        Args:
            fragments: Fragments to inline, in the order their passes run.
            header_token: Token stripped from the top of each fragment file.
        """
        self.fragments: List[Fragment] = list(fragments)
        self.header_token = header_token
        self.warnings: List[str] = []

    def assemble(self, source: bytes) -> AssemblyResult:
        """Run every fragment pass over ``source``.

        Args:
            source: Contents of the primary file.
        Returns:
            AssemblyResult holding the final buffer and one step per fragment.
        Raises:
            InvalidRangeError: If a splice range is inconsistent.
            OSError: If an existing fragment file cannot be read.
        """
        self.warnings.clear()
        steps: List[StepOutcome] = []

        buffer = bytes(source)
        for fragment in self.fragments:
            buffer, step = self._apply(buffer, fragment)
            steps.append(step)

        return AssemblyResult(
            content=buffer,
            input_length=len(source),
            steps=steps,
            warnings=self.warnings.copy(),
        )

    def build(self, primary_path: Union[str, Path], output_path: Union[str, Path],
              dry_run: bool = False) -> AssemblyResult:
        """Assemble ``primary_path`` and write the result to ``output_path``.

        The output file is overwritten with a single write once all passes
        have run; with ``dry_run`` nothing is written.
        """
        source = Path(primary_path).read_bytes()
        result = self.assemble(source)

        output = Path(output_path)
        result.output_path = output
        if not dry_run:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_bytes(result.content)
            result.written = True
        return result

    def _apply(self, buffer: bytes, fragment: Fragment) -> Tuple[bytes, StepOutcome]:
        """Apply one fragment pass, returning the new buffer and its outcome."""
        marker = fragment.marker_bytes
        start = buffer.find(marker)
        if start == -1:
            return buffer, StepOutcome.skipped(fragment, SkipReason.MARKER_NOT_FOUND)
        end = start + len(marker)

        if not fragment.path.is_file():
            if fragment.path.exists():
                self.warnings.append(f"not a file: {fragment.path}")
            else:
                self.warnings.append(f"file not exist: {fragment.path}")
            return buffer, StepOutcome.skipped(fragment, SkipReason.FRAGMENT_MISSING)

        header = strip_leading_header(fragment.path.read_bytes(), self.header_token)
        if header.misplaced:
            self.warnings.append(
                f'Should place "{self.header_token}" at the top of {fragment.path}'
            )

        step = StepOutcome(
            fragment=fragment,
            status=StepStatus.SPLICED,
            start=start,
            end=end,
            replacement_length=len(header.content),
            header_stripped=header.stripped,
        )
        return replace_range(buffer, start, end, header.content), step


def build_file(primary_path: Union[str, Path], output_path: Union[str, Path],
               fragments: Iterable[Fragment], header_token: Optional[str] = None,
               dry_run: bool = False) -> AssemblyResult:
    """Convenience wrapper around :class:`Assembler` for a single build."""
    assembler = Assembler(fragments, header_token or HEADER_TOKEN)
    return assembler.build(primary_path, output_path, dry_run=dry_run)
