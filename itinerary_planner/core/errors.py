# core/errors.py


class PlannerError(RuntimeError):
    """Base class for every error raised by the planner."""


class ConfigurationError(PlannerError):
    """A required API key is missing from the environment."""


class InvalidRequestError(PlannerError):
    """The submitted entries are missing, empty or malformed."""


class FlightSearchError(PlannerError):
    """The flight-search API answered with an error or an unexpected shape."""
