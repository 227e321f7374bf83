import pytest

from ipp_cli.assembly import (
    Assembler,
    Fragment,
    SkipReason,
    StepStatus,
    build_file,
)
from ipp_cli.assembly.constants import HEADER_TOKEN


def _fragment(project, name):
    return Fragment(name=name, path=project.root / "src" / name)


def test_single_fragment_end_to_end(project):
    primary = project("src/main.cpp", b'A #include "f1.ipp" B')
    project("src/f1.ipp", b'#include "ipp_inc.h"\n\nHELLO')
    output = project.root / "out.cpp"

    result = Assembler([_fragment(project, "f1.ipp")]).build(primary, output)

    assert output.read_bytes() == b"A HELLO B"
    assert result.written
    assert result.input_length == len(b'A #include "f1.ipp" B')
    assert result.output_length == len(b"A HELLO B")

    step = result.steps[0]
    assert step.status == StepStatus.SPLICED
    assert (step.start, step.end) == (2, 2 + len('#include "f1.ipp"'))
    assert step.replacement_length == 5
    assert step.header_stripped


def test_missing_fragment_file_leaves_marker(project):
    primary = project("src/main.cpp", b'#include "f1.ipp"\n#include "f2.ipp"\n')
    project("src/f1.ipp", b"ONE")
    output = project.root / "out.cpp"

    result = Assembler(
        [_fragment(project, "f1.ipp"), _fragment(project, "f2.ipp")]
    ).build(primary, output)

    content = output.read_bytes()
    assert content == b'ONE\n#include "f2.ipp"\n'
    assert result.steps[1].status == StepStatus.SKIPPED
    assert result.steps[1].reason == SkipReason.FRAGMENT_MISSING
    assert len(result.warnings) == 1
    assert result.warnings[0].startswith("file not exist:")


def test_marker_not_found_is_noop(project):
    project("src/f1.ipp", b"ONE")
    source = b'int main() { return 0; }\n'

    result = Assembler([_fragment(project, "f1.ipp")]).assemble(source)

    assert result.content == source
    assert result.steps[0].reason == SkipReason.MARKER_NOT_FOUND
    assert result.warnings == []


def test_marker_checked_before_fragment_file(project):
    result = Assembler([_fragment(project, "nowhere.ipp")]).assemble(b"nothing here")

    assert result.steps[0].reason == SkipReason.MARKER_NOT_FOUND
    assert result.warnings == []


def test_only_first_occurrence_replaced(project):
    project("src/f1.ipp", b"X")
    source = b'#include "f1.ipp" #include "f1.ipp"'

    result = Assembler([_fragment(project, "f1.ipp")]).assemble(source)

    assert result.content == b'X #include "f1.ipp"'


def test_passes_run_in_configured_order(project):
    # f1 brings in the marker for f2; f2's pass runs later and sees it.
    project("src/f1.ipp", b'[#include "f2.ipp"]')
    project("src/f2.ipp", b"two")
    source = b'<#include "f1.ipp">'

    forward = Assembler(
        [_fragment(project, "f1.ipp"), _fragment(project, "f2.ipp")]
    ).assemble(source)
    backward = Assembler(
        [_fragment(project, "f2.ipp"), _fragment(project, "f1.ipp")]
    ).assemble(source)

    assert forward.content == b"<[two]>"
    assert backward.content == b'<[#include "f2.ipp"]>'
    assert backward.steps[0].reason == SkipReason.MARKER_NOT_FOUND


def test_each_fragment_gets_one_pass(project):
    project("src/f1.ipp", b'again: #include "f1.ipp"')
    source = b'#include "f1.ipp"'

    result = Assembler([_fragment(project, "f1.ipp")]).assemble(source)

    assert result.content == b'again: #include "f1.ipp"'
    assert len(result.steps) == 1


def test_misplaced_header_kept_and_warned(project):
    raw = b"// fragment\n" + HEADER_TOKEN.encode() + b"\nBODY"
    project("src/f1.ipp", raw)

    result = Assembler([_fragment(project, "f1.ipp")]).assemble(b'<#include "f1.ipp">')

    assert result.content == b"<" + raw + b">"
    assert not result.steps[0].header_stripped
    assert len(result.warnings) == 1
    assert "at the top of" in result.warnings[0]


def test_custom_marker_and_header(project):
    project("src/part.inc", b"// header\nPART")
    fragment = Fragment(name="part", path=project.root / "src" / "part.inc", marker="@@PART@@")

    result = Assembler([fragment], header_token="// header").assemble(b"x @@PART@@ y")

    assert result.content == b"x PART y"


def test_empty_fragment_removes_marker(project):
    project("src/empty.ipp", HEADER_TOKEN.encode() + b"\n")

    result = Assembler([_fragment(project, "empty.ipp")]).assemble(b'a#include "empty.ipp"b')

    assert result.content == b"ab"
    assert result.steps[0].replacement_length == 0


def test_dry_run_does_not_write(project):
    primary = project("src/main.cpp", b'#include "f1.ipp"')
    project("src/f1.ipp", b"ONE")
    output = project.root / "out.cpp"

    result = build_file(primary, output, [_fragment(project, "f1.ipp")], dry_run=True)

    assert result.content == b"ONE"
    assert not result.written
    assert not output.exists()


def test_output_overwritten(project):
    primary = project("src/main.cpp", b"fresh")
    output = project("out.cpp", b"stale content that is longer")

    Assembler([]).build(primary, output)

    assert output.read_bytes() == b"fresh"


def test_missing_primary_raises_and_writes_nothing(project):
    output = project.root / "out.cpp"

    with pytest.raises(FileNotFoundError):
        Assembler([]).build(project.root / "src" / "missing.cpp", output)

    assert not output.exists()


def test_fragment_default_marker():
    fragment = Fragment(name="utils.ipp", path="src/utils.ipp")

    assert fragment.marker == '#include "utils.ipp"'
    assert fragment.marker_bytes == b'#include "utils.ipp"'


def test_fragment_path_is_directory(project):
    (project.root / "src" / "dir.ipp").mkdir()

    result = Assembler([_fragment(project, "dir.ipp")]).assemble(b'#include "dir.ipp"')

    assert result.content == b'#include "dir.ipp"'
    assert result.steps[0].reason == SkipReason.FRAGMENT_MISSING
    assert result.warnings[0].startswith("not a file:")
