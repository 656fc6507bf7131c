"""Application version module.

In development: reads the installed distribution metadata, falling back to
the VERSION file at the project root.
In frozen builds: uses _BAKED_VERSION, set when the executable is packaged.
"""

# Overwritten when packaging a frozen build.
_BAKED_VERSION = None

DISTRIBUTION_NAME = "hat-overlay-editor"


def get_version() -> str:
    """Get the application version string (e.g. '1.0.0')."""
    if _BAKED_VERSION is not None:
        return _BAKED_VERSION
    return _dev_version()


def _dev_version() -> str:
    """Installed package version, else the VERSION file (dev only)."""
    from importlib.metadata import version, PackageNotFoundError
    from pathlib import Path

    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        pass

    # VERSION file is at project root (editor/src/version.py -> project root)
    version_file = Path(__file__).resolve().parent.parent.parent / "VERSION"
    try:
        return version_file.read_text().strip()
    except FileNotFoundError:
        return "0.0.0"
