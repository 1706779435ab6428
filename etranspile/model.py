"""Data describing the items declared in a source file and the file itself."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Item:
    """Something defined in the code: a variable, a function or a class."""

    scopes: list[str] = field(default_factory=list)
    name: str = ""
    type: str = ""


@dataclass
class Variable(Item):
    """A declared variable."""

    static: bool = False
    is_initialized: bool = False


@dataclass
class Function(Item):
    """A declared function; ``args`` maps argument names to their types."""

    args: dict[str, str] = field(default_factory=dict)


@dataclass
class ClassConstructor(Function):
    """A constructor of a declared class."""


@dataclass
class ClassItem(Item):
    """A declared class with its members."""

    constructors: list[ClassConstructor] = field(default_factory=list)
    methods: dict[str, Function] = field(default_factory=dict)
    variables: dict[str, Variable] = field(default_factory=dict)
    static_methods: dict[str, Function] = field(default_factory=dict)
    static_variables: dict[str, Variable] = field(default_factory=dict)


@dataclass
class FileData:
    """What is known about one input file."""

    path: str = ""
    file_name: str = ""
    input_file_path: str = ""
    current_line: int = 0
    tag_lines: list[int] = field(default_factory=list)
    associated_files: list[str] = field(default_factory=list)
    variables: list[Variable] = field(default_factory=list)
    functions: list[Function] = field(default_factory=list)
    classes: list[ClassItem] = field(default_factory=list)