"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                       Thermostat related errors
# ============================================================================


class TemperatureOutOfRangeError(DomainError, ValueError):
    """Raised when a requested temperature falls outside the allowed range."""

    def __init__(self, value: int, minimum: int, maximum: int) -> None:
        super().__init__(
            f"Temperature out of range: {value} (allowed {minimum}-{maximum})."
        )
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
