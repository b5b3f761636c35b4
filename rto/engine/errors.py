"""Errors raised by the affordability engine."""


class InputValidationError(ValueError):
    """Raised when calculator input fails validation.

    Carries every violation, in rule order, so the caller can show them all at once.
    """

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class CalculationError(ValueError):
    """Raised when validated input is still degenerate for the math (e.g. no equity contribution)."""
