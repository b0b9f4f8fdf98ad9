"""Exception hierarchy for loading, building and reporting on org hierarchies."""


class AnalyticsError(Exception):
    """Base class for every error raised by org_analytics."""


# --- record sources ---------------------------------------------------------


class SourceError(AnalyticsError):
    """The employee source could not be turned into records."""


class SourceReadError(SourceError):
    """The source file is missing, unreadable or undecodable."""


class RecordParseError(SourceError):
    """The source was read but its content is not a valid employee list."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


# --- hierarchy construction -------------------------------------------------


class BuildError(AnalyticsError):
    """Root cardinality is wrong; no tree can be built."""


class NoRootFound(BuildError):
    def __init__(self) -> None:
        super().__init__("Employee list has no CEO")


class MultipleRootsFound(BuildError):
    def __init__(self, root_ids: list[int]) -> None:
        super().__init__(f"Employee list has more than one CEO: {root_ids}")
        self.root_ids = root_ids


# --- report calls -----------------------------------------------------------


class ReportInputError(AnalyticsError, ValueError):
    """A report was called with a missing tree or bad parameters."""


class NullTreeError(ReportInputError):
    def __init__(self) -> None:
        super().__init__("Employees hierarchy must not be None")


class InvalidBoundsError(ReportInputError):
    pass


class InvalidThresholdError(ReportInputError):
    pass
