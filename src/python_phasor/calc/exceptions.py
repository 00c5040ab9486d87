__all__ = [
    "DimensionMismatchError"
]


class DimensionMismatchError(Exception):
    pass
