"""
Tests for tolerance configuration.

Validates:
    - LinalgConfig defaults and construction-time validation
    - set_config / get_config round trip
    - config_context scoping and restoration (also on error)
    - is_near_zero / resolve_epsilon
"""

import pytest

from pylistalg.core.exceptions import ValidationError
from pylistalg.core.tolerances import (
    DEFAULT_EPSILON,
    LinalgConfig,
    config_context,
    get_config,
    is_near_zero,
    resolve_epsilon,
    set_config,
)


class TestLinalgConfig:

    def test_defaults(self):
        config = LinalgConfig()
        assert config.epsilon == 1e-12
        assert config.max_cofactor_size == 8
        assert config.cofactor_warn_size == 7

    def test_frozen(self):
        config = LinalgConfig()
        with pytest.raises(AttributeError):
            config.epsilon = 1.0

    def test_rejects_non_positive_epsilon(self):
        with pytest.raises(ValidationError, match="epsilon"):
            LinalgConfig(epsilon=0.0)
        with pytest.raises(ValidationError, match="epsilon"):
            LinalgConfig(epsilon=-1e-9)

    def test_rejects_non_numeric_epsilon(self):
        with pytest.raises(ValidationError, match="epsilon: expected a real number"):
            LinalgConfig(epsilon="x")
        with pytest.raises(ValidationError):
            with config_context(epsilon="x"):
                pass

    def test_rejects_small_cofactor_size(self):
        with pytest.raises(ValidationError, match="max_cofactor_size"):
            LinalgConfig(max_cofactor_size=1)

    def test_rejects_non_integer_size(self):
        with pytest.raises(ValidationError, match="cofactor_warn_size"):
            LinalgConfig(cofactor_warn_size=7.5)


class TestConfigScope:

    def test_get_config_default(self):
        assert get_config().epsilon == DEFAULT_EPSILON

    def test_set_config_returns_previous(self):
        previous = set_config(epsilon=1e-6)
        try:
            assert previous.epsilon == DEFAULT_EPSILON
            assert get_config().epsilon == 1e-6
        finally:
            set_config(epsilon=previous.epsilon)
        assert get_config().epsilon == DEFAULT_EPSILON

    def test_unknown_field(self):
        with pytest.raises(ValidationError, match="unknown configuration field"):
            set_config(tolerance=1e-3)

    def test_context_restores(self):
        with config_context(epsilon=1e-3, max_cofactor_size=4) as config:
            assert config.epsilon == 1e-3
            assert get_config().max_cofactor_size == 4
        assert get_config().epsilon == DEFAULT_EPSILON
        assert get_config().max_cofactor_size == 8

    def test_context_restores_on_error(self):
        with pytest.raises(RuntimeError):
            with config_context(epsilon=1e-3):
                raise RuntimeError("boom")
        assert get_config().epsilon == DEFAULT_EPSILON

    def test_nested_contexts(self):
        with config_context(epsilon=1e-3):
            with config_context(epsilon=1e-6):
                assert get_config().epsilon == 1e-6
            assert get_config().epsilon == 1e-3


class TestNearZero:

    def test_strict_threshold(self):
        assert is_near_zero(0.0)
        assert is_near_zero(-5e-13)
        assert not is_near_zero(1e-12)
        assert not is_near_zero(1.0)

    def test_explicit_eps(self):
        assert is_near_zero(1e-4, eps=1e-3)

    def test_follows_config(self):
        with config_context(epsilon=1e-3):
            assert is_near_zero(1e-4)

    def test_resolve_epsilon(self):
        assert resolve_epsilon(None) == DEFAULT_EPSILON
        assert resolve_epsilon(0.5) == 0.5
        with pytest.raises(ValidationError, match="eps"):
            resolve_epsilon(0.0)
        with pytest.raises(ValidationError, match="eps: expected a real number"):
            resolve_epsilon("x")
