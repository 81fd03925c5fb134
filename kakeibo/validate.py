"""Validation of the numeric choices typed in by the user."""

INVALID_INPUT_MESSAGE = "入力値が不正です"

_SERVICE_TYPES = frozenset({0, 1, 2})
_REGISTER_TYPES = frozenset({0, 1})
_CATEGORY_TYPES = frozenset({0, 1, 2})


class InvalidInputError(ValueError):
    """Raised when a menu choice is outside the accepted range."""

    def __init__(self, message: str = INVALID_INPUT_MESSAGE) -> None:
        super().__init__(message)


def validate_service_type(service_type: int) -> None:
    """Accept 0 (register), 1 (summarize) or 2 (statistics)."""
    if service_type not in _SERVICE_TYPES:
        raise InvalidInputError()


def validate_register_type(register_type: int) -> None:
    """Accept 0 (income) or 1 (expense)."""
    if register_type not in _REGISTER_TYPES:
        raise InvalidInputError()


def validate_category_type(register_type: int, category_type: int) -> None:
    """Accept a category number valid for the given register type."""
    # Income and expense currently share the same three category numbers.
    if category_type not in _CATEGORY_TYPES:
        raise InvalidInputError()