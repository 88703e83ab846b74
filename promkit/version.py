"""Build information and its human-readable forms."""

from __future__ import annotations

import platform
import sys

# Set at build time.
VERSION = ""
REVISION = ""
BRANCH = ""
BUILD_USER = ""
BUILD_DATE = ""
PYTHON_VERSION = platform.python_version()
PLATFORM = f"{sys.platform}/{platform.machine()}"

_TEMPLATE = """
{program}, version {version} (branch: {branch}, revision: {revision})
  build user:       {build_user}
  build date:       {build_date}
  python version:   {python_version}
  platform:         {platform}
"""


def print_version(program: str) -> str:
    """Return a multi-line description of the build of ``program``."""
    text = _TEMPLATE.format(
        program=program,
        version=VERSION,
        branch=BRANCH,
        revision=REVISION,
        build_user=BUILD_USER,
        build_date=BUILD_DATE,
        python_version=PYTHON_VERSION,
        platform=PLATFORM,
    )
    return text.strip()


def info() -> str:
    """Return version, branch and revision information."""
    return f"(version={VERSION}, branch={BRANCH}, revision={REVISION})"


def build_context() -> str:
    """Return interpreter version, build user and build date information."""
    return f"(python={PYTHON_VERSION}, user={BUILD_USER}, date={BUILD_DATE})"