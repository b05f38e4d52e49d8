"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from dm2doxy.models import (
    DocComment,
    Environment,
    Location,
    Parameter,
    ProcDecl,
    TypeNode,
    VarDecl,
)
from dm2doxy.parser import InMemoryEnvironmentParser

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


def build_sample_environment() -> Environment:
    """A two-file environment with builtins, a documented item and a subtype.

    File 1 (code/obj.dm)::

        1  /// An item.
        2  /obj/item
        3      var/num/amount
        4      proc/use(mob/user)

    File 2 (code/sub/tool.dm)::

        1  /obj/item/tool
        2      verb/wield()
    """
    tool = TypeNode(
        path="/obj/item/tool",
        location=Location(2, 1),
        parent="/obj/item",
        procs={"wield": ProcDecl(location=Location(2, 2), kind="verb")},
    )
    item = TypeNode(
        path="/obj/item",
        location=Location(1, 2),
        parent="/obj",
        vars={"amount": VarDecl(location=Location(1, 3), type_path=["num"])},
        procs={
            "use": ProcDecl(
                location=Location(1, 4),
                kind="proc",
                parameters=[Parameter(path=["mob"], name="user")],
            )
        },
        children=[tool],
    )
    obj = TypeNode(path="/obj", location=Location(0, 3), children=[item])
    root = TypeNode(
        path="",
        location=Location(0, 1),
        procs={"world_log": ProcDecl(location=Location(0, 2), kind="proc")},
        children=[obj],
    )
    return Environment(
        files={0: "builtins.dm", 1: "code/obj.dm", 2: "code/sub/tool.dm"},
        tree=root,
        comments=[DocComment(location=Location(1, 1), text="/// An item.")],
    )


@pytest.fixture
def sample_environment() -> Environment:
    return build_sample_environment()


@pytest.fixture
def in_memory_parser(sample_environment: Environment) -> InMemoryEnvironmentParser:
    return InMemoryEnvironmentParser(sample_environment)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DM2DOXY_PARSER", raising=False)
    monkeypatch.delenv("DM2DOXY_OBJTREE", raising=False)
    return tmp_path
