import logging
import shlex
import subprocess
from collections.abc import Sequence
from pathlib import Path

from dm2doxy.errors import ConfigurationError, ParseError
from dm2doxy.models import Environment
from dm2doxy.parser.json_dump import load_environment

logger = logging.getLogger(__name__)


class CommandEnvironmentParser:
    """Run an external dump tool on the ``.dme`` file and read its JSON output.

    Implements the ``EnvironmentParser`` protocol.
    """

    def __init__(self, command: str | Sequence[str]) -> None:
        argv = shlex.split(command) if isinstance(command, str) else list(command)
        if not argv:
            raise ConfigurationError("parser command is empty")
        self._argv = argv

    @property
    def argv(self) -> list[str]:
        return list(self._argv)

    def parse(self, path: Path) -> Environment:
        argv = [*self._argv, str(path)]
        logger.info("Running parser: %s", shlex.join(argv))
        try:
            result = subprocess.run(argv, capture_output=True)
        except OSError as exc:
            raise ParseError(f"could not run parser {self._argv[0]}: {exc}") from exc
        if result.returncode != 0:
            detail = result.stderr.decode("utf-8", errors="replace").strip() or "no output"
            raise ParseError(f"parser exited with status {result.returncode}: {detail}")
        return load_environment(result.stdout, self._argv[0])
