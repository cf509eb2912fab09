"""Domain error taxonomy shared by the entities, the loader and the dispatcher."""


class RideShareError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(RideShareError, ValueError):
    """Malformed construction input or a malformed lookup id."""


class NotFoundError(RideShareError, LookupError):
    """A well-formed id that must resolve to an entity does not."""


class NoDriversAvailableError(RideShareError, RuntimeError):
    """No driver is AVAILABLE to take a new trip."""


class RecordLoadError(RideShareError):
    """A source file is missing or one of its rows is invalid."""
