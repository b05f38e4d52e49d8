from pathlib import Path

from pydantic import ValidationError

from dm2doxy.errors import ParseError
from dm2doxy.models import Environment


def load_environment(payload: str | bytes, source: str) -> Environment:
    try:
        return Environment.model_validate_json(payload)
    except ValidationError as exc:
        raise ParseError(f"invalid environment dump from {source}: {exc}") from exc


class JsonEnvironmentParser:
    """Read an object tree that an external tool already dumped to disk."""

    def __init__(self, dump_path: str | Path) -> None:
        self._dump_path = Path(dump_path)

    def parse(self, path: Path) -> Environment:
        try:
            payload = self._dump_path.read_bytes()
        except FileNotFoundError:
            raise ParseError(f"environment dump not found: {self._dump_path}") from None
        return load_environment(payload, str(self._dump_path))
