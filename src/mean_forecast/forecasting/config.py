"""Configuration for the mean forecasting model."""

from __future__ import annotations

import numbers
from dataclasses import dataclass

from mean_forecast.exceptions import ConfigError

# Number of simulated paths used for bootstrap prediction intervals
DEFAULT_TIMES = 5000

# Forecast horizon (number of steps ahead)
DEFAULT_HORIZON = 10

# Prediction interval levels (percent) reported by default
DEFAULT_LEVELS = (80, 95)


@dataclass(frozen=True)
class WindowConfig:
    """Rolling window configuration for the mean model.

    Attributes:
        window_size: Number of trailing observations averaged at each step.
            None (default) means the full-sample mean is used instead of a
            rolling window.

    Examples:
        >>> WindowConfig().window_size is None
        True
        >>> WindowConfig(window_size=7).window_size
        7
    """

    window_size: int | None = None

    def __post_init__(self) -> None:
        if self.window_size is None:
            return
        # bool is an int subclass, but window(True) is never intended
        if isinstance(self.window_size, bool) or not isinstance(
            self.window_size, numbers.Integral
        ):
            raise ConfigError(
                f"window_size must be a positive integer or None, got {self.window_size!r}"
            )
        if self.window_size < 1:
            raise ConfigError(f"window_size must be >= 1, got {self.window_size}")
        object.__setattr__(self, "window_size", int(self.window_size))

    @classmethod
    def from_size(cls, size: int | None = None) -> WindowConfig:
        """Create a WindowConfig, accepting integral floats such as 7.0.

        Args:
            size: Window size, or None for no rolling window.

        Returns:
            WindowConfig instance.
        """
        if size is None:
            return cls()
        if isinstance(size, float) and size.is_integer():
            size = int(size)
        return cls(window_size=size)
