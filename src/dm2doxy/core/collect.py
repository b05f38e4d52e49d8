"""Flatten the object tree and comment stream into location-tagged fragments."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from dm2doxy.models import SCOPE, Definition, DocComment, Location, ProcDecl, TypeNode


@dataclass(frozen=True)
class Collection:
    definitions: list[tuple[Location, Definition]]
    extends: Mapping[str, str]


def qualified_name(path: str) -> str:
    """``/obj/item`` becomes ``obj::item``; the root path stays empty."""
    return path.removeprefix("/").replace("/", SCOPE)


def _proc_fragments(name: str, proc: ProcDecl) -> list[str]:
    fragments = [f"{proc.kind or ''} {name}("]
    sep = ""
    for param in proc.parameters:
        type_prefix = "".join(segment + SCOPE for segment in param.path)
        fragments.append(f"{sep}{type_prefix}{param.name}")
        sep = ", "
    fragments.append("){}")
    return fragments


def collect_definitions(tree: TypeNode, comments: Iterable[DocComment]) -> Collection:
    definitions: list[tuple[Location, Definition]] = []
    extends: dict[str, str] = {}

    for comment in comments:
        definitions.append((comment.location, Definition("", comment.text, is_comment=True)))

    def visit(ty: TypeNode) -> None:
        if not ty.path:
            class_name = ""
        else:
            class_name = qualified_name(ty.path)
            if ty.parent:
                parent = qualified_name(ty.parent)
                if parent:
                    extends[class_name] = parent
            definitions.append((ty.location, Definition(class_name, "")))

        for name, var in ty.vars.items():
            decl = SCOPE.join(var.type_path) if var.type_path else ""
            definitions.append((var.location, Definition(class_name, f"{decl} {name};")))

        for name, proc in ty.procs.items():
            for fragment in _proc_fragments(name, proc):
                definitions.append((proc.location, Definition(class_name, fragment)))

        for child in ty.children:
            visit(child)

    visit(tree)
    return Collection(definitions=definitions, extends=MappingProxyType(extends))
