"""Validation failures raised by the ledger and scaling engine."""


class ScalerError(Exception):
    """Base class for recoverable input failures."""

    code: str = "ScalerError"


class EmptyNameError(ScalerError, ValueError):
    """Ingredient name is empty or whitespace only."""

    code = "EmptyName"


class NonPositiveQuantityError(ScalerError, ValueError):
    """Ingredient quantity is not a finite number greater than zero."""

    code = "NonPositiveQuantity"


class UnknownUnitError(ScalerError, ValueError):
    """Ingredient unit is not part of the configured unit set."""

    code = "UnknownUnit"


class IndexOutOfRangeError(ScalerError, IndexError):
    """Position does not refer to a current ledger entry."""

    code = "IndexOutOfRange"


class InvalidOriginalError(ScalerError, ValueError):
    """Original servings is not a finite number greater than zero."""

    code = "InvalidOriginal"


class InvalidTargetError(ScalerError, ValueError):
    """Target servings is not a finite number greater than zero."""

    code = "InvalidTarget"
