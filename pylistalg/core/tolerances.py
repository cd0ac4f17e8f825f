"""
Tolerances and limits for numerical decisions.

Defines the noise floor used for every "is this zero?" decision in the
library, and the size ceiling for cofactor expansion:
- epsilon: values with |x| < epsilon are treated as zero by epsilon(),
  divide() (NA result) and inv() (singular matrix)
- max_cofactor_size: largest matrix order det()/inv() will expand
- cofactor_warn_size: order at which a slow-expansion warning is logged

The active configuration lives in a context variable, so changes made with
config_context() are scoped to the current thread or task.
"""

import numbers
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import Any, Iterator

from pylistalg.core.exceptions import ValidationError


# Noise floor for near-zero tests
DEFAULT_EPSILON: float = 1e-12

# Laplace expansion is O(n!) and inv() expands n^2 minors of order n - 1;
# at 8 an inverse stays well under a second
DEFAULT_MAX_COFACTOR_SIZE: int = 8

DEFAULT_COFACTOR_WARN_SIZE: int = 7


def _check_positive(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    if not value > 0:
        raise ValidationError(f"{name}: must be positive, got {value!r}")
    return value


@dataclass(frozen=True)
class LinalgConfig:
    """
    Numerical configuration.

    Attributes:
        epsilon: Absolute near-zero threshold
        max_cofactor_size: Maximum square-matrix order for det() and inv()
        cofactor_warn_size: Order at which a slow-expansion warning is logged
    """
    epsilon: float = DEFAULT_EPSILON
    max_cofactor_size: int = DEFAULT_MAX_COFACTOR_SIZE
    cofactor_warn_size: int = DEFAULT_COFACTOR_WARN_SIZE

    def __post_init__(self) -> None:
        _check_positive(self.epsilon, 'epsilon')
        for name in ('max_cofactor_size', 'cofactor_warn_size'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 2:
                raise ValidationError(
                    f"{name}: must be an integer >= 2, got {value!r}"
                )


_config: ContextVar[LinalgConfig] = ContextVar('pylistalg_config', default=LinalgConfig())


def get_config() -> LinalgConfig:
    """Return the active configuration."""
    return _config.get()


def set_config(**changes: Any) -> LinalgConfig:
    """
    Replace fields of the active configuration.

    Args:
        **changes: LinalgConfig fields to change

    Returns:
        The previous configuration, so callers can restore it

    Raises:
        ValidationError: If a field is unknown or a value is invalid
    """
    previous = _config.get()
    _config.set(_updated(previous, changes))
    return previous


@contextmanager
def config_context(**changes: Any) -> Iterator[LinalgConfig]:
    """
    Temporarily change the configuration.

    Usage:
        with config_context(epsilon=1e-9):
            inv(M)

    Args:
        **changes: LinalgConfig fields to change inside the block

    Yields:
        The configuration active inside the block
    """
    token = _config.set(_updated(_config.get(), changes))
    try:
        yield _config.get()
    finally:
        _config.reset(token)


def resolve_epsilon(eps: float | None) -> float:
    """Return eps if given, else the configured noise floor."""
    if eps is None:
        return _config.get().epsilon
    return _check_positive(eps, 'eps')


def is_near_zero(x: float, eps: float | None = None) -> bool:
    """
    Check whether a scalar is within the noise floor of zero.

    Uses the strict test |x| < eps, the same test epsilon() applies.
    """
    return abs(x) < resolve_epsilon(eps)


def _updated(config: LinalgConfig, changes: dict[str, Any]) -> LinalgConfig:
    try:
        return replace(config, **changes)
    except TypeError as e:
        raise ValidationError(f"unknown configuration field: {e}") from e
