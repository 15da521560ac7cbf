"""Typed accessors for scalar platform variables.

Every accessor reads the environment afresh on each call. Pass a snapshot or
any other `EnvironmentReaderPort` as `environment` to read from it instead of
the process environment.
"""

from __future__ import annotations

from ipaddress import IPv4Address, IPv6Address
from pathlib import Path
from uuid import UUID

from babel import Locale
from sqlalchemy.engine import URL

from cf_env import constants
from cf_env.domain import (
    MemoryLimit,
    SocketAddress,
    parse_database_url,
    parse_guid,
    parse_ip_address,
    parse_locale,
    parse_memory_limit,
    parse_port,
    parse_socket_address,
    parse_unsigned_integer,
)
from cf_env.interfaces import EnvironmentReaderPort

from ._common import accessor_read_parsed, accessor_read_required


def get_instance_address(*, environment: EnvironmentReaderPort | None = None) -> SocketAddress:
    """Return `CF_INSTANCE_ADDR` as a typed `ip:port` pair.

    Raises:
        EnvNotSetError: Raised when the variable is absent.
        EnvMalformedError: Raised when the value is not `ip:port`.
    """

    return accessor_read_parsed(constants.CF_INSTANCE_ADDR, parse_socket_address, environment)


def get_instance_guid(*, environment: EnvironmentReaderPort | None = None) -> UUID:
    """Return `CF_INSTANCE_GUID` as a typed GUID.

    Raises:
        EnvNotSetError: Raised when the variable is absent.
        EnvMalformedError: Raised when the value is not a GUID.
    """

    return accessor_read_parsed(constants.CF_INSTANCE_GUID, parse_guid, environment)


def get_instance_index(*, environment: EnvironmentReaderPort | None = None) -> int:
    """Return `CF_INSTANCE_INDEX` as a non-negative integer.

    Raises:
        EnvNotSetError: Raised when the variable is absent.
        EnvMalformedError: Raised for negative or non-numeric values.
    """

    return accessor_read_parsed(constants.CF_INSTANCE_INDEX, parse_unsigned_integer, environment)


def get_instance_ip(*, environment: EnvironmentReaderPort | None = None) -> IPv4Address | IPv6Address:
    """Return `CF_INSTANCE_IP` as a typed IP address.

    Raises:
        EnvNotSetError: Raised when the variable is absent.
        EnvMalformedError: Raised when the value is not an IP address.
    """

    return accessor_read_parsed(constants.CF_INSTANCE_IP, parse_ip_address, environment)


def get_instance_internal_ip(*, environment: EnvironmentReaderPort | None = None) -> IPv4Address | IPv6Address:
    """Return `CF_INSTANCE_INTERNAL_IP` as a typed IP address.

    Raises:
        EnvNotSetError: Raised when the variable is absent.
        EnvMalformedError: Raised when the value is not an IP address.
    """

    return accessor_read_parsed(constants.CF_INSTANCE_INTERNAL_IP, parse_ip_address, environment)


def get_instance_port(*, environment: EnvironmentReaderPort | None = None) -> int:
    """Return `CF_INSTANCE_PORT` as a 16-bit port number.

    Raises:
        EnvNotSetError: Raised when the variable is absent.
        EnvMalformedError: Raised for non-numeric or out-of-range values.
    """

    return accessor_read_parsed(constants.CF_INSTANCE_PORT, parse_port, environment)


def get_port(*, environment: EnvironmentReaderPort | None = None) -> int:
    """Return `PORT`, the port the application must listen on.

    Raises:
        EnvNotSetError: Raised when the variable is absent.
        EnvMalformedError: Raised for non-numeric or out-of-range values.
    """

    return accessor_read_parsed(constants.PORT, parse_port, environment)


def get_database_url(*, environment: EnvironmentReaderPort | None = None) -> URL:
    """Return `DATABASE_URL` as a parsed SQLAlchemy URL.

    Raises:
        EnvNotSetError: Raised when the variable is absent.
        EnvMalformedError: Raised when the value is not a URL.
    """

    return accessor_read_parsed(constants.DATABASE_URL, parse_database_url, environment)


def get_lang(*, environment: EnvironmentReaderPort | None = None) -> Locale:
    """Return `LANG` as a typed locale.

    Any locale parser failure is reported as `EnvMalformedError`.

    Raises:
        EnvNotSetError: Raised when the variable is absent.
        EnvMalformedError: Raised when the value is not a locale.
    """

    return accessor_read_parsed(constants.LANG, parse_locale, environment)


def get_memory_limit(*, environment: EnvironmentReaderPort | None = None) -> MemoryLimit:
    """Return `MEMORY_LIMIT` as a typed size and unit.

    Raises:
        EnvNotSetError: Raised when the variable is absent.
        UnknownMemoryUnitError: Raised when the trailing unit is unsupported.
        EnvMalformedError: Raised when the size is not an unsigned integer.
    """

    return accessor_read_parsed(constants.MEMORY_LIMIT, parse_memory_limit, environment)


def get_home(*, environment: EnvironmentReaderPort | None = None) -> Path:
    """Return `HOME` as a path."""

    return Path(accessor_read_required(constants.HOME, environment))


def get_pwd(*, environment: EnvironmentReaderPort | None = None) -> Path:
    """Return `PWD` as a path."""

    return Path(accessor_read_required(constants.PWD, environment))


def get_tmp_dir(*, environment: EnvironmentReaderPort | None = None) -> Path:
    """Return `TMPDIR` as a path."""

    return Path(accessor_read_required(constants.TMPDIR, environment))


def get_user(*, environment: EnvironmentReaderPort | None = None) -> str:
    """Return `USER` unchanged."""

    return accessor_read_required(constants.USER, environment)
