"""Data carried by the interpreter: variables and function definitions."""

from dataclasses import dataclass, field


@dataclass
class Variable:
    """A typed value; both type name and value are kept as text."""

    type: str = ""
    value: str = ""


@dataclass
class FunctionDef:
    """A user function: return type, ``(type, name)`` parameters and body lines."""

    return_type: str = ""
    params: list[tuple[str, str]] = field(default_factory=list)
    body: list[str] = field(default_factory=list)