"""Execution of user-defined functions."""

import re
from collections.abc import Mapping, Sequence

from .evaluator import EvaluationError, eval_expression
from .model import FunctionDef, Variable

_LOC = re.compile(r"loc\s+(\w+)\s*=\s*(int|str)\(([^)]*)\)\s*!", re.ASCII)
_RETURN = re.compile(r"return\s+(.*)!")


def execute_function(
    func: FunctionDef,
    args: Sequence[str],
    functions: Mapping[str, FunctionDef],
    global_vars: Mapping[str, Variable],
) -> str:
    """Run ``func`` with ``args`` and return its result as text ('' without a return)."""
    if len(args) < len(func.params):
        raise EvaluationError(
            f"Expected {len(func.params)} arguments, got {len(args)}"
        )

    local_vars: dict[str, Variable] = {}
    for (ptype, pname), value in zip(func.params, args):
        if (
            not value.startswith('"')
            and value not in local_vars
            and value in global_vars
        ):
            value = global_vars[value].value
        local_vars[pname] = Variable(ptype, value)

    for line in func.body:
        if match := _LOC.fullmatch(line):
            name, vtype, val = match.groups()
            if vtype == "str" and val.startswith('"') and val.endswith('"'):
                val = val[1:-1]
            elif vtype == "int":
                val = eval_expression(val)
            local_vars[name] = Variable(vtype, val)
        elif match := _RETURN.fullmatch(line):
            ret = match.group(1)
            for name, var in local_vars.items():
                ret = ret.replace(name, var.value)
            return eval_expression(ret)

    return ""