"""Shared resolve-then-parse contract used by every accessor."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from cf_env.errors import CfEnvError, EnvNotSetError
from cf_env.interfaces import EnvironmentReaderPort, env_resolve_reader

logger = logging.getLogger(__name__)

ParsedT = TypeVar("ParsedT")


def accessor_read_required(name: str, environment: EnvironmentReaderPort | None) -> str:
    """Resolve one variable or raise `EnvNotSetError`.

    Args:
        name: Variable name.
        environment: Optional reader; the process environment when omitted.

    Returns:
        str: Raw value. An empty string counts as set.

    Raises:
        EnvNotSetError: Raised when the variable is absent.
    """

    raw_value = env_resolve_reader(environment).env_read(name)
    if raw_value is None:
        logger.debug("Environment variable %s is not set", name)
        raise EnvNotSetError(name)
    return raw_value


def accessor_read_parsed(
    name: str,
    parser: Callable[[str, str], ParsedT],
    environment: EnvironmentReaderPort | None,
) -> ParsedT:
    """Resolve one variable and convert it with a type-specific parser.

    Args:
        name: Variable name.
        parser: Parser taking the raw value and the variable name.
        environment: Optional reader; the process environment when omitted.

    Returns:
        ParsedT: Parsed value.

    Raises:
        EnvNotSetError: Raised when the variable is absent.
        CfEnvError: Raised by the parser when the value is malformed.
    """

    raw_value = accessor_read_required(name, environment)
    try:
        return parser(raw_value, name)
    except CfEnvError as error:
        # Raw values may carry credentials and are never logged.
        logger.debug("Environment variable %s rejected: %s", name, error.error_code.value)
        raise
