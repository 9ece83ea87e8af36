"""``Nullable[T]`` — a value that may be Python ``None``."""

type Nullable[T] = T | None

__all__ = ["Nullable"]
