"""Exception hierarchy for network telemetry collection."""


class TelemetryError(Exception):
    """Base exception for all telemetry errors."""


class SourceShapeError(TelemetryError):
    """Data source returned something other than a list."""

    def __init__(self, operation: str, result: object):
        self.operation = operation
        self.result_type = type(result).__name__
        super().__init__(f"{operation} returned non-list result ({self.result_type})")


class SourceCallError(TelemetryError):
    """Data source call raised."""

    def __init__(self, operation: str, cause: BaseException):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {cause}")


class ProcessingError(TelemetryError):
    """Mapping or joining raw records failed."""


class SnapshotError(TelemetryError):
    """Snapshot file could not be read or parsed."""
