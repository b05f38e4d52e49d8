import os
from pathlib import Path

from dm2doxy.core.ports.parser import EnvironmentParser
from dm2doxy.errors import ConfigurationError
from dm2doxy.parser.command import CommandEnvironmentParser
from dm2doxy.parser.json_dump import JsonEnvironmentParser

PARSER_ENV_VAR = "DM2DOXY_PARSER"
OBJTREE_ENV_VAR = "DM2DOXY_OBJTREE"


def get_environment_parser(command: str | None = None, objtree: str | Path | None = None) -> EnvironmentParser:
    """Pick the parser adapter; explicit arguments win over environment variables."""
    if objtree:
        return JsonEnvironmentParser(objtree)
    if command:
        return CommandEnvironmentParser(command)

    env_objtree = os.getenv(OBJTREE_ENV_VAR)
    if env_objtree:
        return JsonEnvironmentParser(env_objtree)
    env_command = os.getenv(PARSER_ENV_VAR)
    if env_command:
        return CommandEnvironmentParser(env_command)

    raise ConfigurationError(f"no environment parser configured; set {PARSER_ENV_VAR} or {OBJTREE_ENV_VAR}")
