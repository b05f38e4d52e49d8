"""Insert class scaffolding where the owning class changes.

The pass is a fold over the location-ordered definitions. The accumulator
remembers where the most recent declaration landed and which class owned it;
whenever the next declaration belongs to another class (or another file) the
previous class is closed on its own last line and the new one is opened on the
current line. Doc comments never move the accumulator, so a comment directly
above a class opener can end up inside the scaffolding of the previous class.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from dm2doxy.core.index import LocationGroup
from dm2doxy.models import Location

PseudoSourceFile = dict[int, list[str]]
PseudoSourceTree = dict[int, PseudoSourceFile]

CLOSE = "}"
OPEN = "{"


@dataclass(frozen=True)
class BoundaryState:
    location: Location | None = None
    class_name: str = ""


def _push(tree: PseudoSourceTree, location: Location, fragment: str) -> None:
    tree.setdefault(location.file, {}).setdefault(location.line, []).append(fragment)


def _step(
    tree: PseudoSourceTree,
    remaining_extends: dict[str, str],
    state: BoundaryState,
    location: Location,
    class_name: str,
) -> BoundaryState:
    if state.location is None or class_name != state.class_name or location.file != state.location.file:
        if state.location is not None and state.class_name:
            _push(tree, state.location, CLOSE)
        if class_name:
            _push(tree, location, f"class {class_name}")
            parent = remaining_extends.pop(class_name, None)
            if parent is not None:
                _push(tree, location, f" extends {parent}")
            _push(tree, location, OPEN)
    return BoundaryState(location=location, class_name=class_name)


def track_boundaries(groups: Iterable[LocationGroup], extends: Mapping[str, str]) -> PseudoSourceTree:
    # Each class gets its extends clause on first open only.
    remaining_extends = dict(extends)
    tree: PseudoSourceTree = {}
    state = BoundaryState()

    for location, definitions in groups:
        for definition in definitions:
            if not definition.is_comment:
                state = _step(tree, remaining_extends, state, location, definition.class_name)
            _push(tree, location, definition.text)

    if state.location is not None and state.class_name:
        _push(tree, state.location, CLOSE)

    return tree
