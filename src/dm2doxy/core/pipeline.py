import logging
from pathlib import Path
from typing import TextIO

from dm2doxy.core.boundaries import PseudoSourceTree, track_boundaries
from dm2doxy.core.collect import collect_definitions
from dm2doxy.core.emit import FileSummary, emit_files
from dm2doxy.core.index import index_definitions
from dm2doxy.core.paths import pseudo_source_path, relative_to_workdir
from dm2doxy.core.ports.parser import EnvironmentParser
from dm2doxy.errors import PseudoSourceNotFoundError
from dm2doxy.models import Environment

logger = logging.getLogger(__name__)


def collate(environment: Environment) -> PseudoSourceTree:
    collection = collect_definitions(environment.tree, environment.comments)
    groups = index_definitions(collection.definitions)
    logger.debug(
        "Collected %d definitions at %d locations (%d classes extend a parent)",
        len(collection.definitions),
        len(groups),
        len(collection.extends),
    )
    return track_boundaries(groups, collection.extends)


def run_produce(
    parser: EnvironmentParser,
    path: Path,
    stdout: TextIO | None = None,
    workdir: Path | None = None,
) -> list[FileSummary]:
    """Parse the environment rooted at a ``.dme`` file and write its pseudo-source files.

    The whole collated tree is built before the first file is written, so a
    parse failure leaves nothing behind.
    """
    environment = parser.parse(path)
    tree = collate(environment)
    return emit_files(tree, environment, stdout=stdout, base=workdir)


def read_pseudo_source(path: Path, workdir: Path | None = None) -> bytes:
    relative = relative_to_workdir(path, workdir)
    target = pseudo_source_path(relative, workdir)
    try:
        return target.read_bytes()
    except FileNotFoundError:
        raise PseudoSourceNotFoundError(str(relative), str(target)) from None
