from pathlib import Path

from dm2doxy.models import Environment


class InMemoryEnvironmentParser:
    def __init__(self, environment: Environment) -> None:
        self.environment = environment
        self.parsed: list[Path] = []

    def parse(self, path: Path) -> Environment:
        self.parsed.append(path)
        return self.environment
