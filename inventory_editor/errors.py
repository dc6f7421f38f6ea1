"""
Exceptions raised by the editor core.

Each carries the OutcomeKind it maps to so the workflow layer can turn it
into an Outcome without a lookup table.
"""

from .models import OutcomeKind


class EditorError(Exception):
    """Base class for refused editor operations."""
    kind: OutcomeKind = OutcomeKind.CONFIGURATION_ERROR


class SheetNotFoundError(EditorError):
    """A sheet named by configuration or by the caller does not exist."""
    kind = OutcomeKind.CONFIGURATION_ERROR

    def __init__(self, sheet_name: str):
        self.sheet_name = sheet_name
        super().__init__(f'Sheet "{sheet_name}" not found')


class QuantityValidationError(EditorError):
    """New quantity is missing, not a number, or negative."""
    kind = OutcomeKind.VALIDATION_ERROR


class InputValidationError(EditorError):
    """A required text input (SKU, name) is blank."""
    kind = OutcomeKind.VALIDATION_ERROR
