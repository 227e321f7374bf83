"""Version management for IPP CLI."""

import re
from importlib import metadata
from pathlib import Path

# Build-time version constant (may be injected during packaging)
__BUILD_VERSION__ = None

_VERSION_RE = re.compile(r'^version\s*=\s*["\']([^"\']+)["\']', re.MULTILINE)


def get_version() -> str:
    """
    Get the current version.

    Tries the build-time constant, then installed package metadata, then
    ``pyproject.toml`` in a source checkout.

    Returns:
        str: Version string, or "unknown".
    """
    if __BUILD_VERSION__:
        return __BUILD_VERSION__

    try:
        return metadata.version("ipp-cli")
    except metadata.PackageNotFoundError:
        pass

    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject_path.exists():
        match = _VERSION_RE.search(pyproject_path.read_text(encoding="utf-8"))
        if match:
            return match.group(1)

    return "unknown"


__version__ = get_version()
