from .config import OR_PANIC_MESSAGE


class OutcomePanicError(RuntimeError):
    """Raised when a `Failure` is unwrapped as if it were a `Success`."""

    def __init__(self, message: str = OR_PANIC_MESSAGE) -> None:
        super().__init__(message)


__all__ = ["OutcomePanicError"]
