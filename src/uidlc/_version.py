"""Version of the uidlc compiler, as reported by ``uidlc --version``."""

import re
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _distribution_version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"
_VERSION_LINE = re.compile(r'^version\s*=\s*"([^"]+)"', re.MULTILINE)


def get_version() -> str:
    """
    Version of the running compiler.

    A source checkout reports the version in its pyproject.toml so that
    local edits show up without reinstalling; an installed wheel reports
    its distribution metadata.
    """
    if _PYPROJECT.is_file():
        match = _VERSION_LINE.search(_PYPROJECT.read_text())
        if match:
            return match.group(1)
    try:
        return _distribution_version("uidlc")
    except PackageNotFoundError:
        return "0+unknown"
