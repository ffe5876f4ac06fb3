"""Top-level package for the lesson test ingestion and scoring engine.

Provides subpackages:
- lesson_toolkit.ingestion – turns extracted test text into graded questions
- lesson_toolkit.scoring – score, progress and attendance aggregation
- lesson_toolkit.core – shared immutable models, validation and record shapes
- lesson_toolkit.common – thresholds and numeric helpers
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text(encoding="utf-8")
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.3.1"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    # Fallback to importlib.metadata for installed package
    try:
        from importlib.metadata import PackageNotFoundError, version as pkg_version
        return pkg_version("lesson-toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
