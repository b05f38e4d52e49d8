from pathlib import Path
from typing import Protocol

from dm2doxy.models import Environment


class EnvironmentParser(Protocol):
    def parse(self, path: Path) -> Environment: ...
