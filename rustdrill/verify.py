"""Checking exercises in order and prompting about their progress."""

from __future__ import annotations

from collections.abc import Iterable

from rustdrill.exercise import (
    CompilationError,
    CompiledExercise,
    ExecutionError,
    Exercise,
    Mode,
)
from rustdrill.ui import Spinner, blue, bold, no_emoji, success, warn


class ExerciseFailed(Exception):
    """Raised for the first exercise that fails or is still marked pending."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} is not finished")
        self.exercise = exercise


def verify(exercises: Iterable[Exercise], verbose: bool = False) -> None:
    """Check each exercise in turn, stopping at the first unfinished one."""
    for exercise in exercises:
        try:
            if exercise.mode is Mode.TEST:
                finished = _compile_and_test(exercise, interactive=True, verbose=verbose)
            elif exercise.mode is Mode.COMPILE:
                finished = _compile_and_run_interactively(exercise)
            else:
                finished = _compile_only(exercise)
        except (CompilationError, ExecutionError) as err:
            raise ExerciseFailed(exercise) from err
        if not finished:
            raise ExerciseFailed(exercise)


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run an exercise's tests without prompting."""
    _compile_and_test(exercise, interactive=False, verbose=verbose)


def _compile(exercise: Exercise, spinner: Spinner) -> CompiledExercise:
    try:
        return exercise.compile()
    except CompilationError as err:
        spinner.finish_and_clear()
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(err.output.stderr)
        raise


def _compile_only(exercise: Exercise) -> bool:
    with Spinner(f"Compiling {exercise}...") as spinner:
        _compile(exercise, spinner).close()
        spinner.finish_and_clear()
    success(f"Successfully compiled {exercise}!")
    return prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    with Spinner(f"Compiling {exercise}...") as spinner:
        with _compile(exercise, spinner) as compiled:
            spinner.set_message(f"Running {exercise}...")
            try:
                output = compiled.run()
            except ExecutionError as err:
                spinner.finish_and_clear()
                warn(f"Ran {exercise} with errors")
                print(err.output.stdout)
                print(err.output.stderr)
                raise
            spinner.finish_and_clear()
    success(f"Successfully ran {exercise}!")
    return prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, interactive: bool, verbose: bool) -> bool:
    with Spinner(f"Testing {exercise}...") as spinner:
        with _compile(exercise, spinner) as compiled:
            try:
                output = compiled.run()
            except ExecutionError as err:
                spinner.finish_and_clear()
                warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
                print(err.output.stdout)
                raise
            spinner.finish_and_clear()
    if verbose:
        print(output.stdout)
    success(f"Successfully tested {exercise}")
    if interactive:
        return prompt_for_completion(exercise, None)
    return True


def _separator() -> str:
    return bold("====================")


def prompt_for_completion(exercise: Exercise, prompt_output: str | None) -> bool:
    """Return True if the exercise is done, otherwise show where the marker sits."""
    state = exercise.state()
    if state.done():
        return True

    without_emoji = no_emoji()
    if exercise.mode is Mode.COMPILE:
        success_msg = "The code is compiling!"
    elif exercise.mode is Mode.TEST:
        success_msg = "The code is compiling, and the tests pass!"
    elif without_emoji:
        success_msg = "The code is compiling, and Clippy is happy!"
    else:
        success_msg = "The code is compiling, and 📎 Clippy 📎 is happy!"

    print()
    if without_emoji:
        print(f"~*~ {success_msg} ~*~")
    else:
        print(f"🎉 🎉  {success_msg} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        print(_separator())
        print(prompt_output)
        print(_separator())
        print()

    print("You can keep working on this exercise,")
    print(f"or jump into the next one by removing the {bold('`I AM NOT DONE`')} comment:")
    print()
    for context_line in state.context:
        line = bold(context_line.line) if context_line.important else context_line.line
        print(f"{bold(blue(f'{context_line.number:>2}'))} {blue('|')}  {line}")

    return False