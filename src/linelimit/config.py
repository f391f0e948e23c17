import os
from collections.abc import Mapping

from linelimit.constants import (
    DEFAULT_MAX_LENGTH,
    ERR_MAX_LENGTH_RANGE,
    ERR_MAX_LENGTH_TYPE,
    ERR_UNKNOWN_OPTION,
    MAX_LENGTH_ENV_VAR,
    OPTION_MAX_LENGTH,
)


class ConfigurationError(ValueError):
    """Raised when a rule is given an invalid configuration."""


def validate_max_length(value: object) -> int:
    """Return value if it is a usable maximum line length."""
    # bool is an int subclass but never a length
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigurationError(ERR_MAX_LENGTH_TYPE.format(value=value))
    if value <= 0:
        raise ConfigurationError(ERR_MAX_LENGTH_RANGE.format(value=value))
    return value


def resolve_configuration(configuration: Mapping[str, object]) -> int:
    """Resolve a rule configuration mapping to a max_length.

    Only ``max_length`` is recognized; a missing value falls back to the
    default, anything else is an error.
    """
    unknown = sorted(set(configuration) - {OPTION_MAX_LENGTH})
    if unknown:
        raise ConfigurationError(ERR_UNKNOWN_OPTION.format(names=", ".join(unknown)))
    return validate_max_length(configuration.get(OPTION_MAX_LENGTH, DEFAULT_MAX_LENGTH))


def get_max_length() -> int:
    """Get the max line length from LINELIMIT_MAX_LENGTH, defaulting to 120."""
    raw = os.environ.get(MAX_LENGTH_ENV_VAR)
    if raw is None:
        return DEFAULT_MAX_LENGTH
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise ConfigurationError(ERR_MAX_LENGTH_TYPE.format(value=raw)) from exc
    return validate_max_length(value)
