from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, Field

BUILTINS_FILE_ID = 0

SCOPE = "::"


@dataclass(frozen=True, order=True)
class Location:
    file: int
    line: int


@dataclass(frozen=True)
class Definition:
    class_name: str
    text: str
    is_comment: bool = False


class DocComment(BaseModel):
    location: Location
    text: str


class Parameter(BaseModel):
    path: list[str] = Field(default_factory=list)
    name: str


class VarDecl(BaseModel):
    location: Location
    type_path: list[str] | None = None


class ProcDecl(BaseModel):
    location: Location
    kind: Literal["proc", "verb"] | None = None
    parameters: list[Parameter] = Field(default_factory=list)


class TypeNode(BaseModel):
    path: str = ""
    location: Location
    parent: str | None = None
    vars: dict[str, VarDecl] = Field(default_factory=dict)
    procs: dict[str, ProcDecl] = Field(default_factory=dict)
    children: list["TypeNode"] = Field(default_factory=list)


TypeNode.model_rebuild()  # necessary for recursive types


class Environment(BaseModel):
    files: dict[int, str] = Field(default_factory=dict)
    tree: TypeNode
    comments: list[DocComment] = Field(default_factory=list)

    def file_path(self, file_id: int) -> str | None:
        return self.files.get(file_id)
