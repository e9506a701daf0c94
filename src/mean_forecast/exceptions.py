"""Domain-specific exceptions for mean_forecast.

This module defines custom exceptions that are part of the public API.
All exceptions inherit from MeanForecastError for easy catching.
"""


class MeanForecastError(Exception):
    """Base exception for all mean_forecast errors.

    Users can catch this exception to handle any error raised by the package.
    """

    pass


class InvalidInputError(MeanForecastError):
    """Raised when a model cannot be estimated from the supplied data.

    This exception is raised when:
    - The input holds more than one measured variable
    - Every observation is missing
    - Arguments such as horizon or simulation count are out of range
    """

    pass


class MultivariateInputError(InvalidInputError):
    """Raised when more than one measured variable is supplied."""

    pass


class AllMissingError(InvalidInputError):
    """Raised when every observation is missing, so no estimate exists."""

    pass


class ConfigError(InvalidInputError):
    """Raised when there is a configuration error.

    This exception is raised when:
    - A window size is not a positive integer
    - Required configuration values are missing
    """

    pass


class DataQualityError(MeanForecastError):
    """Raised when panel input data fails validation.

    This exception is raised when:
    - Required columns are missing from input data
    - No series in the panel could be forecast
    """

    pass
