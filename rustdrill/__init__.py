"""Compile, run and track Rust exercises, with worked solutions in Python."""

__version__ = "4.5.0"