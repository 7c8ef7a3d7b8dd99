# app/errors.py


class InvalidInputError(ValueError):
    """Malformed path input. `index` is the offending point, or None for whole-path problems."""

    def __init__(self, reason: str, index: int | None = None):
        self.reason = reason
        self.index = index
        msg = reason if index is None else f"{reason} (index {index})"
        super().__init__(msg)
