"""
Result type used by every generation stage.

A stage returns a GenerationResult instead of raising, and stages are
chained with ``bind`` so that the first failure short-circuits the rest.
"""

from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class ErrorKind(Enum):
    """Where a failure originated."""

    PARSE = "parse"
    DERIVATION = "derivation"
    RENDER = "render"
    IO = "io"


def describe_exception(exception: BaseException) -> str:
    """Render an exception as ``"<Type>: <message>"``."""
    message = str(exception)
    name = type(exception).__name__
    return f"{name}: {message}" if message else name


class GenerationResult(Generic[T]):
    """Container for a stage outcome: either a value or an error description."""

    def __init__(
        self,
        value: Optional[T] = None,
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize a successful result.

        Args:
            value: Value produced by the stage
            warnings: Any warnings from the stage
            metadata: Additional metadata about the stage
        """
        self.value = value
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.error_kind: Optional[ErrorKind] = None
        self.exception: Optional[BaseException] = None

    @classmethod
    def ok(cls, value: T, **kwargs) -> "GenerationResult[T]":
        """Create a successful result."""
        return cls(value, **kwargs)

    @classmethod
    def error(
        cls,
        message: str,
        exception: BaseException = None,
        kind: ErrorKind = ErrorKind.RENDER,
    ) -> "GenerationResult[Any]":
        """Create a failed result."""
        result = cls()
        result.success = False
        result.error_message = message
        result.error_kind = kind
        result.exception = exception
        return result

    @classmethod
    def attempt(
        cls, func: Callable[..., T], *args, kind: ErrorKind = ErrorKind.RENDER
    ) -> "GenerationResult[T]":
        """Run ``func`` and capture any exception as a failure of ``kind``."""
        try:
            return cls.ok(func(*args))
        except Exception as e:
            return cls.error(describe_exception(e), exception=e, kind=kind)

    def bind(
        self, func: Callable[[T], "GenerationResult[U]"]
    ) -> "GenerationResult[U]":
        """Feed the value to the next stage, or pass the failure through."""
        if not self.success:
            return self
        return func(self.value)

    def map(self, func: Callable[[T], U]) -> "GenerationResult[U]":
        """Transform the value of a successful result."""
        if not self.success:
            return self
        return GenerationResult(func(self.value), self.warnings, self.metadata)

    def tap(
        self,
        on_success: Optional[Callable[[T], Any]] = None,
        on_failure: Optional[Callable[["GenerationResult[T]"], Any]] = None,
    ) -> "GenerationResult[T]":
        """Run a side effect for either outcome and return self unchanged."""
        if self.success:
            if on_success is not None:
                on_success(self.value)
        elif on_failure is not None:
            on_failure(self)
        return self

    def unwrap(self) -> T:
        """Return the value or raise GeneratorError for a failure."""
        if not self.success:
            from .generator import GeneratorError

            raise GeneratorError(self.error_message)
        return self.value

    def __str__(self) -> str:
        if self.success:
            return f"Success({self.value})"
        return f"Failure({self.error_message})"

    __repr__ = __str__
