"""Exceptions raised by big-integer conversions."""


class ParseBigIntError(ValueError):
    """Raised when a string is not a valid number in the given radix."""

    def __init__(self, radix: int) -> None:
        self.radix = radix
        super().__init__(f"invalid {radix}-based number representation")


class TryFromBigIntError(OverflowError):
    """Raised when a big integer does not fit into a fixed-width integer type."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"conversion from BigInt to {type_name} overflowed")