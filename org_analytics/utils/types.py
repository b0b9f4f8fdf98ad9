"""Shared type definitions for the analytics run."""

from enum import StrEnum


type ValidationOutcome = dict[str, str | int]


class RunStatus(StrEnum):
    OK = "ok"
    ERROR = "error"
