# ============================================================================
# RescueTower - Error Classes
#
# Purpose: Custom exception hierarchy for the package
# Inputs: Error messages and context
# Outputs: Structured exceptions
# Dependencies: None
# Usage: raise CapacityError("Catalog is full")
#
# Changelog:
#   2026-03-02: Initial error classes
#   2026-03-09: Added UnsortedCatalogError for the optional search verification pass
# ============================================================================

from typing import Optional


class RescueTowerError(Exception):
    """Base exception for all RescueTower errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        """
        Initialize error.

        Args:
            message: Error message
            details: Optional detailed error information
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        """String representation."""
        if self.details:
            return f"{self.message}\nDetails: {self.details}"
        return self.message


class ConfigurationError(RescueTowerError):
    """Raised when configuration is invalid or missing."""

    pass


class CapacityError(RescueTowerError):
    """Raised when a component is added to a full catalog."""

    pass


class ComponentValidationError(RescueTowerError):
    """Raised when a component field violates its constraints."""

    pass


class UnknownStrategyError(ConfigurationError):
    """Raised when a sort key has no registered strategy."""

    pass


class UnsortedCatalogError(RescueTowerError):
    """Raised by the optional verification pass when the catalog is not sorted by name."""

    pass


class DataLoadError(RescueTowerError):
    """Raised when a components file cannot be read or parsed."""

    pass


class SinkError(RescueTowerError):
    """Raised when sink write operation fails."""

    pass


class ValidationError(RescueTowerError):
    """Raised when report validation fails."""

    pass
