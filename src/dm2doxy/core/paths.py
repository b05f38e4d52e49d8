from pathlib import Path

from dm2doxy.errors import Dm2DoxyError

PSEUDO_SOURCE_DIR = "dm2doxy"

_SEPARATOR_SENTINEL = "$"
_SOURCE_SUFFIX = ".dm"
_PSEUDO_SOURCE_SUFFIX = ".."


def pseudo_source_path(source: str | Path, base: Path | None = None) -> Path:
    """Map a source path relative to the working directory to its pseudo-source file.

    ``code/game/atoms.dm`` becomes ``dm2doxy/code$game$atoms..``.
    """
    flat = str(source).replace("/", _SEPARATOR_SENTINEL).replace("\\", _SEPARATOR_SENTINEL)
    if flat.endswith(_SOURCE_SUFFIX):
        flat = flat[: -len(_SOURCE_SUFFIX)] + _PSEUDO_SOURCE_SUFFIX
    return (base or Path()) / PSEUDO_SOURCE_DIR / flat


def relative_to_workdir(source: Path, workdir: Path | None = None) -> Path:
    workdir = (workdir or Path.cwd()).absolute()
    absolute = source if source.is_absolute() else workdir / source
    try:
        return absolute.relative_to(workdir)
    except ValueError:
        raise Dm2DoxyError(f"{source} is not inside the working directory {workdir}") from None
