"""Source assembly: marker lookup, header stripping and range splicing."""

from .assembler import Assembler, build_file
from .buffer_editor import replace_range
from .header import HeaderStrip, strip_leading_header
from .models import AssemblyResult, Fragment, SkipReason, StepOutcome, StepStatus

__all__ = [
    # Assembly
    'Assembler',
    'build_file',
    'AssemblyResult',
    'Fragment',
    'StepOutcome',
    'StepStatus',
    'SkipReason',

    # Buffer editing
    'replace_range',
    'HeaderStrip',
    'strip_leading_header',
]
