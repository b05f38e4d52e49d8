from collections.abc import Iterable

from dm2doxy.models import Definition, Location

LocationGroup = tuple[Location, list[Definition]]


def index_definitions(definitions: Iterable[tuple[Location, Definition]]) -> list[LocationGroup]:
    """Group definitions by location, ordered by file then line.

    Definitions that share a location keep the order they were produced in.
    """
    groups: dict[Location, list[Definition]] = {}
    for location, definition in definitions:
        groups.setdefault(location, []).append(definition)
    return sorted(groups.items(), key=lambda item: item[0])
