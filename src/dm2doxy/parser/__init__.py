from dm2doxy.parser.command import CommandEnvironmentParser
from dm2doxy.parser.config import OBJTREE_ENV_VAR, PARSER_ENV_VAR, get_environment_parser
from dm2doxy.parser.json_dump import JsonEnvironmentParser, load_environment
from dm2doxy.parser.memory import InMemoryEnvironmentParser

__all__ = [
    "OBJTREE_ENV_VAR",
    "PARSER_ENV_VAR",
    "CommandEnvironmentParser",
    "InMemoryEnvironmentParser",
    "JsonEnvironmentParser",
    "get_environment_parser",
    "load_environment",
]
