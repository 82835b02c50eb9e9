"""Build version string, computed once at import"""

import os


BUILD = os.getenv("STATIKO_BUILD", "")
COMMIT = os.getenv("STATIKO_COMMIT", "")


def version_string(build: str, commit: str) -> str:
    """Return the human-readable version line for a build number and commit hash."""
    if not build:
        return "statiko [dev build]"
    return f"statiko Build {build} ({commit})"


VERSION = version_string(BUILD, COMMIT)
