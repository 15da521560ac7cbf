"""Typed interfaces for environment access boundaries."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Protocol


class EnvironmentReaderPort(Protocol):
    """Port definition for resolving raw environment variable values."""

    def env_read(self, name: str) -> str | None:
        """Return the raw value for one variable.

        Args:
            name: Case-sensitive variable name.

        Returns:
            str | None: Raw value, or None when the variable is not set.

        Raises:
            RuntimeError: Raised when the environment source is unavailable.
        """


class ProcessEnvironmentReader(EnvironmentReaderPort):
    """Reader over the live process environment, re-read on every call."""

    def env_read(self, name: str) -> str | None:
        return os.environ.get(name)


class MappingEnvironmentReader(EnvironmentReaderPort):
    """Reader over a caller-supplied mapping.

    Used by tests and by callers that captured the environment themselves.
    """

    def __init__(self, values: Mapping[str, str]):
        self._values = dict(values)

    def env_read(self, name: str) -> str | None:
        return self._values.get(name)


def env_resolve_reader(environment: EnvironmentReaderPort | None) -> EnvironmentReaderPort:
    """Return the given reader, or the process reader when none is given.

    Args:
        environment: Optional caller-supplied reader.

    Returns:
        EnvironmentReaderPort: Reader to resolve variables with.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if environment is None:
        return ProcessEnvironmentReader()
    return environment
