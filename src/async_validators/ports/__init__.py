from .validation import IValidator, Messages, ValidatorResult

__all__ = [
    "IValidator",
    "Messages",
    "ValidatorResult",
]
