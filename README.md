# lomake

`lomake` runs scripts written in the small `.lo` language. A script is read
line by line and executed from top to bottom.

## Installation

```
pip install .
```

## Running a script

```
lomake program.lo
```

The file is read as UTF-8. If no file is given, `lomake` prints a usage line
and exits with status 1. If the file cannot be opened, it prints
`Failed to open file` and exits with status 1. A syntax error or a runtime
error stops the run, is printed on standard error with the line number where
it happened (for example `Error at line 3: Undefined variable: x` or
`Syntax error at line 5: ...`), and the exit status is 1.

## The language

Statements end with `!`. Blank lines are ignored, and spaces and tabs are
removed from both ends of every line.

### Variables

```
loc count = int(2 + 3) !
loc name = str("world") !
loc ready = bool(true) !
loc items = arr("a", "b", c) !
```

- `int`: the value may be an expression made of two non-negative integers
  and one operator out of `+ - * / % ^`. Division or remainder by zero gives
  `0`. Results are kept to signed 64-bit range. Any other text is stored as
  written.
- `str`: one pair of surrounding double quotes is removed.
- `bool`: `true` or `1` is stored as `true`, `false` or `0` as `false`;
  anything else is an error.
- `arr`: a comma-separated list; each item is trimmed and loses one pair of
  surrounding double quotes.

A declared variable can be given a new value; its type stays the same.
Assigning to a variable that was never declared is an error.

```
count = 7 * 6!
name = "again"!
ready = 0!
```

### Input

```
age = input-- i- "Your age: "!
nick = input-- str- "Your nick: "!
```

The prompt is written, then one line is read. With `i` the line must begin
with an integer, otherwise the run stops with an error; the line is stored as
an `int` variable. With `str` it is stored as a `str` variable.

### Output

```
print-- "literal text"!
print-- name!
print-- f-add(count, 1)!
```

An array prints as `[a, b, c]`. Printing a variable that does not exist
writes `Undefined variable: <name>` to standard error and the run goes on.
Calling a function that does not exist is an error.

### Functions

```
funS int add(int: a, int: b): {
loc total = int(0) !
return a + b!
}
```

Parameters are written `type: name`, or just `name`. The body runs until the
first `return` line; inside it only `loc` lines of type `int` or `str` take
effect, and other lines are skipped. An argument that names a global
variable is replaced by that variable's value. To evaluate the `return`
expression, every occurrence of a parameter or local variable name in the
text is replaced by its value, and the result is evaluated like an `int`
value. A function without a `return` gives an empty line. Calling a function
with fewer arguments than it has parameters is an error.

### Conditions

```
if- count >> 3 the
print-- "big"!
elif- count === 3 the
print-- "three"!
end--
```

The operators are `>>` (greater than), `<<` (less than) and `===` (equal).
Both sides are single words. Integers compare as numbers, strings as text.
When the right-hand side is not a variable, it is read as a value of the
left-hand side's type. A condition on an undefined or `bool` variable, or on
variables of different types, is false. `elif-` without `if-`, `end--`
without `if-`, or a malformed condition is an error.

## What the language does not have

There are no loops, no `else` branch, no function calls inside function
bodies, and no output from inside a function. Arithmetic takes exactly two
non-negative integer literals and one operator.

## Using it from Python

```python
import io
from lomake.interpreter import Interpreter, LomakeError

out = io.StringIO()
interp = Interpreter(stdin=io.StringIO(), stdout=out, stderr=io.StringIO())
interp.run([
    'loc x = int(4 * 5) !',
    'print-- x!',
])
print(out.getvalue())        # 20
print(interp.variables["x"])  # Variable(type='int', value='20')
```

`Interpreter` takes optional `stdin`, `stdout` and `stderr` streams (the
process's own streams by default). `run` takes any iterable of lines and
raises `LomakeError` (with `line` and `message` attributes) on the first
error. Variables and functions are kept in `variables` and `functions`
between calls to `run`. `lomake.interpreter.main(argv)` is the command-line
entry point and returns the exit status.

The building blocks are available on their own: `lomake.evaluator`
(`eval_expression`, `evaluate_condition`, `safe_int`, `EvaluationError`),
`lomake.executor` (`execute_function`), `lomake.model` (`Variable`,
`FunctionDef`) and `lomake.utils` (`trim`, `is_string_literal`,
`strip_quotes`).