"""Line-oriented interpreter for ``.lo`` scripts."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

from .evaluator import EvaluationError, eval_expression, evaluate_condition, safe_int
from .executor import execute_function
from .model import FunctionDef, Variable
from .utils import strip_quotes, trim

_LOC = re.compile(r"loc\s+(\w+)\s*=\s*(int|str|bool|arr)\((.*)\)\s*!", re.ASCII)
_ASSIGN = re.compile(r"(\w+)\s*=\s*(.+)!", re.ASCII)
_INPUT = re.compile(r'(\w+)\s*=\s*input--\s*(i|str)-\s*"([^"]*)"!', re.ASCII)
_FUN = re.compile(r"funS\s+(\w+)\s+(\w+)\(([^)]*)\):\s*\{", re.ASCII)
_PRINT = re.compile(
    r'print--\s*(?:("([^"]*)")|(\w+)|f-(\w+)\(([^)]*)\))!', re.ASCII
)
_IF = re.compile(r"if-\s*(\w+)\s*(>>|<<|===)\s*(\w+)\s*the", re.ASCII)
_ELIF = re.compile(r"elif-\s*(\w+)\s*(>>|<<|===)\s*(\w+)\s*the", re.ASCII)

_TRUE_WORDS = ("true", "1")
_FALSE_WORDS = ("false", "0")


class LomakeError(Exception):
    """A script error tied to a line number."""

    def __init__(self, line: int, message: str, *, label: str = "Error at line"):
        self.line = line
        self.message = message
        super().__init__(f"{label} {line}: {message}")


@dataclass
class _IfState:
    matched: bool
    skipping: bool


def _split_commas(text: str) -> list[str]:
    """Split on commas, dropping a single empty trailing piece."""
    pieces = text.split(",")
    if pieces[-1] == "":
        pieces.pop()
    return pieces


def _parse_bool(text: str) -> str | None:
    if text in _TRUE_WORDS:
        return "true"
    if text in _FALSE_WORDS:
        return "false"
    return None


def _parse_params(text: str) -> list[tuple[str, str]]:
    params = []
    for piece in _split_commas(text):
        piece = trim(piece)
        if not piece:
            continue
        ptype, colon, pname = piece.partition(":")
        if colon:
            params.append((trim(ptype), trim(pname)))
        else:
            params.append(("var", piece))
    return params


class Interpreter:
    """Runs script lines, keeping global variables and functions between runs."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ):
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._stderr = stderr if stderr is not None else sys.stderr
        self.variables: dict[str, Variable] = {}
        self.functions: dict[str, FunctionDef] = {}

    def run(self, lines: Iterable[str]) -> None:
        """Execute the script; raise :class:`LomakeError` on the first error."""
        if_stack: list[_IfState] = []
        current: tuple[str, FunctionDef] | None = None

        for lineno, raw in enumerate(lines, start=1):
            line = trim(raw.removesuffix("\n"))
            if not line:
                continue

            if current is not None:
                if line == "}":
                    self.functions[current[0]] = current[1]
                    current = None
                else:
                    current[1].body.append(line)
                continue

            if match := _FUN.fullmatch(line):
                return_type, name, params = match.groups()
                current = (name, FunctionDef(return_type, _parse_params(params)))
                continue

            try:
                if self._control(line, lineno, if_stack):
                    continue
                if if_stack and if_stack[-1].skipping:
                    continue
                self._statement(line, lineno)
            except EvaluationError as exc:
                raise LomakeError(lineno, str(exc)) from exc

    def _control(self, line: str, lineno: int, if_stack: list[_IfState]) -> bool:
        if line.startswith("if-"):
            match = _IF.fullmatch(line)
            if match is None:
                raise LomakeError(lineno, "Malformed if condition")
            result = evaluate_condition(self.variables, *match.groups())
            if_stack.append(_IfState(result, not result))
            return True
        if line.startswith("elif-"):
            if not if_stack:
                raise LomakeError(lineno, "elif without if")
            top = if_stack.pop()
            if top.matched:
                if_stack.append(_IfState(True, True))
            else:
                match = _ELIF.fullmatch(line)
                if match is None:
                    raise LomakeError(lineno, "Malformed elif")
                result = evaluate_condition(self.variables, *match.groups())
                if_stack.append(_IfState(result, not result))
            return True
        if line == "end--":
            if not if_stack:
                raise LomakeError(lineno, "end-- without if")
            if_stack.pop()
            return True
        return False

    def _statement(self, line: str, lineno: int) -> None:
        if match := _LOC.fullmatch(line):
            self._loc(match, lineno)
        elif match := _INPUT.fullmatch(line):
            self._input(match, lineno)
        elif match := _ASSIGN.fullmatch(line):
            self._assign(match, lineno)
        elif match := _PRINT.fullmatch(line):
            self._print(match, lineno)
        else:
            raise LomakeError(lineno, line, label="Syntax error at line")

    def _loc(self, match: re.Match[str], lineno: int) -> None:
        name, vtype, raw = match.group(1), match.group(2), trim(match.group(3))
        if vtype == "str":
            self.variables[name] = Variable("str", strip_quotes(raw))
        elif vtype == "int":
            self.variables[name] = Variable("int", eval_expression(raw))
        elif vtype == "bool":
            value = _parse_bool(raw)
            if value is None:
                raise LomakeError(lineno, f"Invalid bool value: {raw}")
            self.variables[name] = Variable("bool", value)
        else:
            items = [strip_quotes(trim(item)) for item in _split_commas(raw)]
            self.variables[name] = Variable("arr", ",".join(items))

    def _assign(self, match: re.Match[str], lineno: int) -> None:
        name = match.group(1)
        var = self.variables.get(name)
        if var is None:
            raise LomakeError(lineno, f"Undefined variable: {name}")
        rhs = trim(match.group(2))
        if var.type == "int":
            var.value = eval_expression(rhs)
        elif var.type == "bool":
            value = _parse_bool(rhs)
            if value is None:
                raise LomakeError(lineno, f"Invalid bool assignment: {rhs}")
            var.value = value
        else:
            var.value = strip_quotes(rhs)

    def _input(self, match: re.Match[str], lineno: int) -> None:
        name, vtype, prompt = match.groups()
        self._stdout.write(prompt)
        self._stdout.flush()
        text = self._stdin.readline().removesuffix("\n")
        if vtype == "i":
            try:
                safe_int(text)
            except EvaluationError:
                raise LomakeError(lineno, f"Invalid input for int: {text}") from None
            self.variables[name] = Variable("int", text)
        else:
            self.variables[name] = Variable("str", text)

    def _print(self, match: re.Match[str], lineno: int) -> None:
        literal, var_name, func_name, func_args = match.group(2, 3, 4, 5)
        if literal is not None:
            self._emit(literal)
        elif var_name is not None:
            var = self.variables.get(var_name)
            if var is None:
                self._stderr.write(f"Undefined variable: {var_name}\n")
                return
            if var.type == "arr":
                items = [trim(item) for item in _split_commas(var.value)]
                self._emit("[" + ", ".join(items) + "]")
            else:
                self._emit(var.value)
        else:
            args = [trim(arg) for arg in _split_commas(func_args)]
            func = self.functions.get(func_name)
            if func is None:
                raise LomakeError(lineno, f"Undefined function: {func_name}")
            self._emit(execute_function(func, args, self.functions, self.variables))

    def _emit(self, text: str) -> None:
        self._stdout.write(text + "\n")


def main(argv: list[str] | None = None) -> int:
    """Run the script named on the command line; return the exit status."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        sys.stderr.write("Usage: lomake <file.lo>\n")
        return 1
    try:
        with open(args[0], encoding="utf-8") as handle:
            lines = handle.readlines()
    except OSError:
        sys.stderr.write("Failed to open file\n")
        return 1
    try:
        Interpreter().run(lines)
    except LomakeError as exc:
        sys.stdout.flush()
        sys.stderr.write(f"{exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())