# rustdrill

A library for checking small Rust exercises: it reads an exercise list,
compiles each exercise with `rustc` (or lints it with `cargo clippy`), runs the
result, and tells whether the exercise is still marked as unfinished. It also
holds worked solutions to many of the exercises, written as ordinary Python.

## Installing

```
pip install rustdrill
```

Compiling exercises needs a Rust toolchain (`rustc`, and `cargo` for clippy
exercises) on your `PATH`. The worked solutions need nothing beyond Python 3.11.

## The exercise list

Exercises are described in TOML:

```toml
[[exercises]]
name = "variables1"
path = "exercises/variables/variables1.rs"
mode = "compile"   # "compile", "test" or "clippy"
hint = "Declare the variable with let."
```

`rustdrill.exercise.load_exercises(path)` reads such a file and
`parse_exercises(text)` parses the text; both return a list of `Exercise`
objects and raise `ValueError` for a malformed entry.

## Checking exercises

```python
from rustdrill.exercise import load_exercises
from rustdrill.verify import ExerciseFailed, verify

exercises = load_exercises("info.toml")
try:
    verify(exercises, verbose=False)
except ExerciseFailed as err:
    print(err.exercise.hint)
```

`verify` goes through the exercises in order. For each one it compiles it,
then runs the binary (`compile` mode), runs the test harness (`test` mode) or
only checks that clippy passes with warnings denied (`clippy` mode). It stops
with `ExerciseFailed` at the first exercise that fails, and also at the first
one whose source still holds a `// I AM NOT DONE` comment; for that one it
prints the lines around the comment. Pass `verbose=True` to show the output of
test harnesses. `test(exercise, verbose)` runs one exercise's tests without the
completion check.

Lower down, `Exercise.compile()` returns a `CompiledExercise` (a context
manager that removes the temporary binary on exit) or raises
`CompilationError`; `CompiledExercise.run()` returns an `ExerciseOutput` or
raises `ExecutionError`. Both errors carry the captured `output`.
`Exercise.state()` returns a `State` whose `context` lists the lines around the
marker, empty once the marker is gone; `Exercise.looks_done()` is the short
form. Clippy exercises write `./exercises/clippy/Cargo.toml`, so run them from
the directory that holds `exercises/`.

Output is styled with ANSI colours when stdout is a terminal (`CLICOLOR_FORCE`
and `NO_COLOR` are honoured), and a spinner is drawn on stderr while stderr is a
terminal. Set `NO_EMOJI` for plain-text markers in place of emoji.

## Worked solutions

`rustdrill.drills` holds solutions grouped by topic: `quizzes`, `containers`,
`error_handling`, `enums`, `structs`, `generics`, `iterators`, `traits`,
`threads`, `options`, `strings`, `ownership`, `primitives`, `namespaces` and
`lints`.

```python
from rustdrill.drills.quizzes import calculate_apple_price
from rustdrill.drills.error_handling import parse_pos_nonzero, total_cost
from rustdrill.drills.iterators import divide, factorial

calculate_apple_price(65)   # 65
total_cost("34")            # 171
factorial(4)                # 24
divide(81, 9)               # 9
divide(81, 6)               # raises NotDivisibleError
parse_pos_nonzero("0")      # raises ParsePosNonzeroError
```

## What it does not do

There is no command-line program: nothing here checks an exercise directory
from the shell, re-checks exercises when files change, lists exercises with
their status, or prints hints by name. Those are left to code that calls
`load_exercises` and `verify`. The worked solutions do not cover the
basics (if, functions, variables) or conversions exercises.