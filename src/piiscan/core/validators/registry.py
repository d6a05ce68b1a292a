"""Named validator registry.

Validators are plain functions registered under a stable name. Rules refer to
them by name (or by direct reference) and the name is resolved once, when the
rule is built, so a catalog stays introspectable and can be loaded from data.

Two kinds exist:

- *value* validators ``(text) -> bool`` run on the extracted text
- *context* validators ``(document, start, end) -> bool`` read a window of the
  surrounding document

Usage::

    from piiscan.core.validators.registry import register_value_validator

    @register_value_validator("luhn")
    def validate_luhn(text: str) -> bool:
        ...

    validator = resolve_value_validator("luhn")
    validator("4111 1111 1111 1111")  # True
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Union


ValueCheck = Callable[[str], bool]
ContextCheck = Callable[[str, int, int], bool]


class ValidatorKind(str, Enum):
    """Which validators a rule carries."""

    NONE = "none"
    VALUE = "value"
    CONTEXT = "context"
    BOTH = "both"


@dataclass(frozen=True)
class Validator:
    """A validator function bound to its registered name."""

    name: str
    func: Callable[..., bool]

    def __call__(self, *args: object) -> bool:
        return self.func(*args)

    def __repr__(self) -> str:
        return f"Validator({self.name!r})"


ValidatorRef = Union[str, Validator, Callable[..., bool]]

_VALUE_VALIDATORS: dict[str, Validator] = {}
_CONTEXT_VALIDATORS: dict[str, Validator] = {}


def _register(table: dict[str, Validator], kind: str, name: str):
    def decorator(func: Callable[..., bool]) -> Callable[..., bool]:
        if not name:
            raise ValueError(f"{kind} validator {func.__name__} must have a name")
        if name in table:
            raise ValueError(
                f"{kind} validator name {name!r} already registered by "
                f"{table[name].func.__name__}"
            )
        table[name] = Validator(name=name, func=func)
        return func
    return decorator


def register_value_validator(name: str) -> Callable[[ValueCheck], ValueCheck]:
    """Decorator that registers a ``(text) -> bool`` validator under *name*.

    Raises ``ValueError`` if *name* is empty or already taken.
    """
    return _register(_VALUE_VALIDATORS, "Value", name)


def register_context_validator(name: str) -> Callable[[ContextCheck], ContextCheck]:
    """Decorator that registers a ``(document, start, end) -> bool`` validator."""
    return _register(_CONTEXT_VALIDATORS, "Context", name)


def _resolve(table: dict[str, Validator], kind: str, ref: ValidatorRef | None) -> Validator | None:
    if ref is None:
        return None
    if isinstance(ref, Validator):
        return ref
    if isinstance(ref, str):
        try:
            return table[ref]
        except KeyError:
            raise KeyError(
                f"Unknown {kind} validator: {ref!r}. Available: {sorted(table)}"
            ) from None
    if callable(ref):
        # Unregistered functions are allowed; they are named after the function
        return Validator(name=getattr(ref, "__name__", repr(ref)), func=ref)
    raise TypeError(f"Cannot use {type(ref).__name__} as a {kind} validator")


def resolve_value_validator(ref: ValidatorRef | None) -> Validator | None:
    """Turn a name, Validator or plain function into a value Validator.

    Raises ``KeyError`` for an unknown name.
    """
    return _resolve(_VALUE_VALIDATORS, "value", ref)


def resolve_context_validator(ref: ValidatorRef | None) -> Validator | None:
    """Turn a name, Validator or plain function into a context Validator.

    Raises ``KeyError`` for an unknown name.
    """
    return _resolve(_CONTEXT_VALIDATORS, "context", ref)


def get_value_validator_names() -> list[str]:
    """Return the names of all registered value validators."""
    return list(_VALUE_VALIDATORS.keys())


def get_context_validator_names() -> list[str]:
    """Return the names of all registered context validators."""
    return list(_CONTEXT_VALIDATORS.keys())
