"""
Tests for the named validator registry.
"""

import pytest

from piiscan.core.validators import registry
from piiscan.core.validators.registry import (
    Validator,
    get_context_validator_names,
    get_value_validator_names,
    register_value_validator,
    resolve_context_validator,
    resolve_value_validator,
)


@pytest.fixture
def scratch_value_validator():
    """Register a throwaway value validator and remove it afterwards."""
    name = "test_always_true"

    @register_value_validator(name)
    def always_true(text: str) -> bool:
        return True

    yield name
    registry._VALUE_VALIDATORS.pop(name, None)


class TestBuiltinRegistrations:
    """Built-in validators are registered on import."""

    def test_value_names(self):
        names = set(get_value_validator_names())
        assert {"luhn", "iban", "ipv4", "age", "ssn_area", "eu_vat"} <= names

    def test_context_names(self):
        names = set(get_context_validator_names())
        assert {"phone_not_in_iban", "postcode_near_country", "financial_context"} <= names


class TestResolve:
    """Tests for turning references into Validator objects."""

    def test_by_name(self):
        v = resolve_value_validator("luhn")
        assert isinstance(v, Validator)
        assert v.name == "luhn"
        assert v("4111 1111 1111 1111") is True

    def test_none_passes_through(self):
        assert resolve_value_validator(None) is None
        assert resolve_context_validator(None) is None

    def test_validator_instance_passes_through(self):
        v = resolve_value_validator("iban")
        assert resolve_value_validator(v) is v

    def test_plain_callable_wrapped(self):
        def only_digits(text: str) -> bool:
            return text.isdigit()

        v = resolve_value_validator(only_digits)
        assert v.name == "only_digits"
        assert v("123") is True
        assert v("12a") is False

    def test_unknown_name(self):
        with pytest.raises(KeyError, match="no_such_check"):
            resolve_value_validator("no_such_check")

    def test_kinds_are_separate(self):
        """A value validator name is not a context validator name."""
        with pytest.raises(KeyError):
            resolve_context_validator("luhn")

    def test_non_callable_rejected(self):
        with pytest.raises(TypeError):
            resolve_value_validator(42)


class TestRegister:
    """Tests for the registration decorators."""

    def test_registered_function_resolvable(self, scratch_value_validator):
        v = resolve_value_validator(scratch_value_validator)
        assert v("anything") is True

    def test_duplicate_name_rejected(self, scratch_value_validator):
        with pytest.raises(ValueError, match="already registered"):
            @register_value_validator(scratch_value_validator)
            def again(text: str) -> bool:
                return False

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            @register_value_validator("")
            def nameless(text: str) -> bool:
                return False

    def test_decorator_returns_function(self, scratch_value_validator):
        """The decorated function stays a plain function."""
        func = registry._VALUE_VALIDATORS[scratch_value_validator].func
        assert func("x") is True
        assert not isinstance(func, Validator)
