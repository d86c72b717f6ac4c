"""Exercises: their description, compilation, execution and progress state."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path

from rustdrill.ui import no_emoji

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """Return a temporary binary name unique to this process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def clean() -> None:
    """Remove the temporary binary, ignoring a missing file."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Progress of an exercise; an empty context means it is done."""

    context: tuple[ContextLine, ...] = ()

    def done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished command."""

    stdout: str
    stderr: str

    @classmethod
    def _from_process(cls, process: subprocess.CompletedProcess) -> ExerciseOutput:
        return cls(
            stdout=process.stdout.decode("utf-8", errors="replace"),
            stderr=process.stderr.decode("utf-8", errors="replace"),
        )


class CompilationError(Exception):
    """Raised when an exercise fails to compile."""

    def __init__(self, exercise: Exercise, output: ExerciseOutput) -> None:
        super().__init__(f"compilation of {exercise} failed")
        self.exercise = exercise
        self.output = output


class ExecutionError(Exception):
    """Raised when a compiled exercise exits unsuccessfully."""

    def __init__(self, exercise: Exercise, output: ExerciseOutput) -> None:
        super().__init__(f"running {exercise} failed")
        self.exercise = exercise
        self.output = output


class CompiledExercise:
    """A successfully compiled exercise; closing it removes the binary."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise

    def run(self) -> ExerciseOutput:
        return self.exercise._run()

    def close(self) -> None:
        clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def _execute(args: list[str], failure: str) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(args, capture_output=True)
    except OSError as err:
        raise RuntimeError(failure) from err


@dataclass
class Exercise:
    """An exercise as listed in the exercise list file."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __str__(self) -> str:
        return str(self.path)

    def compile(self) -> CompiledExercise:
        """Compile the exercise, raising CompilationError on failure."""
        path = str(self.path)
        if self.mode is Mode.COMPILE:
            args = ["rustc", path, "-o", temp_file(), *RUSTC_COLOR_ARGS]
            process = _execute(args, "Failed to run 'compile' command.")
        elif self.mode is Mode.TEST:
            args = ["rustc", "--test", path, "-o", temp_file(), *RUSTC_COLOR_ARGS]
            process = _execute(args, "Failed to run 'compile' command.")
        else:
            process = self._clippy()

        if process.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise CompilationError(self, ExerciseOutput._from_process(process))

    def _clippy(self) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2018"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        if no_emoji():
            message = "Failed to write Clippy Cargo.toml file."
        else:
            message = "Failed to write 📎 Clippy 📎 Cargo.toml file."
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml, encoding="utf-8")
        except OSError as err:
            raise RuntimeError(message) from err
        # Build a runnable binary too; a failure here shows up again in clippy.
        _execute(
            ["rustc", str(self.path), "-o", temp_file(), *RUSTC_COLOR_ARGS],
            "Failed to compile!",
        )
        # A clean build is needed for clippy to report every lint.
        _execute(
            ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS],
            "Failed to run 'cargo clean'",
        )
        return _execute(
            [
                "cargo", "clippy", "--manifest-path", CLIPPY_CARGO_TOML_PATH,
                *RUSTC_COLOR_ARGS, "--", "-D", "warnings",
            ],
            "Failed to run 'compile' command.",
        )

    def _run(self) -> ExerciseOutput:
        arg = "--show-output" if self.mode is Mode.TEST else ""
        process = _execute([temp_file(), arg], "Failed to run 'run' command")
        output = ExerciseOutput._from_process(process)
        if process.returncode != 0:
            raise ExecutionError(self, output)
        return output

    def state(self) -> State:
        """Report whether the pending marker is still in the source."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()

        lines = _lines(source)
        matched = next(
            (index for index, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)),
            None,
        )
        if matched is None:
            raise RuntimeError("This should not happen at all")

        first = max(matched - CONTEXT, 0)
        last = matched + CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=index + 1, important=index == matched)
                for index, line in enumerate(lines[first:last + 1], start=first)
            )
        )

    def looks_done(self) -> bool:
        """Guess from the marker alone whether the exercise is solved."""
        return self.state().done()


def _lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _text_field(entry: dict, key: str) -> str:
    value = entry[key]
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def parse_exercises(text: str) -> list[Exercise]:
    """Parse an exercise list written in TOML."""
    data = tomllib.loads(text)
    try:
        return [
            Exercise(
                name=_text_field(entry, "name"),
                path=Path(_text_field(entry, "path")),
                mode=Mode(_text_field(entry, "mode")),
                hint=_text_field(entry, "hint"),
            )
            for entry in data["exercises"]
        ]
    except (KeyError, TypeError) as err:
        raise ValueError(f"invalid exercise list: missing {err}") from err


def load_exercises(path: str | os.PathLike) -> list[Exercise]:
    """Read and parse an exercise list file."""
    return parse_exercises(Path(path).read_text(encoding="utf-8"))