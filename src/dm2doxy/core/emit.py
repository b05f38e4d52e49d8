import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from dm2doxy.core.boundaries import PseudoSourceFile, PseudoSourceTree
from dm2doxy.core.paths import pseudo_source_path
from dm2doxy.models import BUILTINS_FILE_ID, Environment

logger = logging.getLogger(__name__)

_BUILTINS_LABEL = "builtins"


@dataclass(frozen=True)
class FileSummary:
    path: str
    lines: int
    fragments: int


def render_pseudo_source(lines: PseudoSourceFile) -> str:
    """Concatenate each line's fragments, padding skipped line numbers with blank lines.

    A fragment containing newlines (a block doc comment) occupies the lines it
    spans, so the padding before the next line shrinks accordingly.
    """
    parts: list[str] = []
    last = 1
    for line_number in sorted(lines):
        fragments = lines[line_number]
        parts.append("\n" * max(0, line_number - last))
        parts.extend(fragments)
        last = max(last, line_number) + sum(fragment.count("\n") for fragment in fragments)
    parts.append("\n")
    return "".join(parts)


def emit_files(
    tree: PseudoSourceTree,
    environment: Environment,
    stdout: TextIO | None = None,
    base: Path | None = None,
) -> list[FileSummary]:
    """Write one pseudo-source file per source file; builtins go to ``stdout``.

    A failed write propagates immediately. Files flushed before it stay on disk.
    """
    out = stdout if stdout is not None else sys.stdout
    summaries: list[FileSummary] = []

    for file_id in sorted(tree):
        lines = tree[file_id]
        text = render_pseudo_source(lines)

        if file_id == BUILTINS_FILE_ID:
            label = environment.file_path(file_id) or _BUILTINS_LABEL
            out.write(text)
            out.flush()
        else:
            source = environment.file_path(file_id)
            if source is None:
                logger.warning("Skipping definitions for unknown file id %d", file_id)
                continue
            label = source
            target = pseudo_source_path(source, base)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(text, encoding="utf-8", newline="\n")
            logger.debug("Wrote %s", target)

        summary = FileSummary(path=label, lines=len(lines), fragments=sum(len(items) for items in lines.values()))
        logger.info("%s: %d lines with %d items", summary.path, summary.lines, summary.fragments)
        summaries.append(summary)

    return summaries
