class AnalyticsError(Exception):
    """Base class for analytics query failures."""


class InvalidQuery(AnalyticsError):
    """The requested query name is missing or not registered."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown analytics query: {name!r}")


class ExecutionFailure(AnalyticsError):
    """A registered query could not be executed against the database."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Analytics query {name!r} failed")
