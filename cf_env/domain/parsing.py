"""Typed scalar parsers for raw environment values.

Each parser is a pure function over one raw string. Parse failures raise
`EnvMalformedError` with a stable reason string naming the expected shape;
the collaborator's own exception is chained for debugging but its text never
reaches the reason.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address, ip_address
from typing import Final
from uuid import UUID

from babel import Locale
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import ArgumentError

from cf_env.errors import EnvMalformedError

logger = logging.getLogger(__name__)

SOCKET_ADDRESS_REASON: Final[str] = "doesn't match the format of ip:port"
GUID_REASON: Final[str] = "isn't a valid guid"
UNSIGNED_INTEGER_REASON: Final[str] = "isn't a valid non-negative integer"
IP_ADDRESS_REASON: Final[str] = "isn't a valid ip address"
PORT_REASON: Final[str] = "isn't a valid port number (0-65535)"
DATABASE_URL_REASON: Final[str] = "isn't a valid database url"
LOCALE_REASON: Final[str] = "isn't a valid locale"

_PORT_MAX: Final[int] = 65535

_GUID_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)

_POSIX_LOCALE_NAMES: Final[frozenset[str]] = frozenset({"C", "POSIX"})
POSIX_LOCALE_IDENTIFIER: Final[str] = "en_US_POSIX"


@dataclass(frozen=True)
class SocketAddress:
    """Typed `ip:port` pair.

    Attributes:
        ip: IPv4 or IPv6 address.
        port: Port number in 0..65535.
    """

    ip: IPv4Address | IPv6Address
    port: int

    def __str__(self) -> str:
        if isinstance(self.ip, IPv6Address):
            return f"[{self.ip}]:{self.port}"
        return f"{self.ip}:{self.port}"


def domain_is_unsigned_integer_text(value: str) -> bool:
    """Return whether the text is a non-empty run of ASCII decimal digits.

    Signs, whitespace and digit-group underscores are rejected, unlike `int()`.

    Args:
        value: Candidate text.

    Returns:
        bool: True when the text is an unsigned integer literal.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return bool(value) and value.isascii() and value.isdigit()


def parse_unsigned_integer(value: str, variable_name: str) -> int:
    """Parse one non-negative integer without an upper bound.

    Args:
        value: Raw text.
        variable_name: Variable named in the error payload.

    Returns:
        int: Parsed value.

    Raises:
        EnvMalformedError: Raised for signed, blank or non-numeric text.
    """

    if not domain_is_unsigned_integer_text(value):
        raise EnvMalformedError(variable_name, UNSIGNED_INTEGER_REASON)
    return int(value)


def parse_port(value: str, variable_name: str) -> int:
    """Parse one 16-bit unsigned port number.

    Args:
        value: Raw text.
        variable_name: Variable named in the error payload.

    Returns:
        int: Port in 0..65535.

    Raises:
        EnvMalformedError: Raised for non-numeric or out-of-range text.
    """

    if not domain_is_unsigned_integer_text(value):
        raise EnvMalformedError(variable_name, PORT_REASON)
    port = int(value)
    if port > _PORT_MAX:
        raise EnvMalformedError(variable_name, PORT_REASON)
    return port


def parse_socket_address(value: str, variable_name: str) -> SocketAddress:
    """Parse `<ipv4>:<port>` or `[<ipv6>]:<port>` into `SocketAddress`.

    Host names are not resolved and are rejected.

    Args:
        value: Raw text.
        variable_name: Variable named in the error payload.

    Returns:
        SocketAddress: Parsed address.

    Raises:
        EnvMalformedError: Raised when the text is not an ip:port pair.
    """

    host_text, separator, port_text = value.rpartition(":")
    if not separator or not domain_is_unsigned_integer_text(port_text):
        raise EnvMalformedError(variable_name, SOCKET_ADDRESS_REASON)

    bracketed = host_text.startswith("[") and host_text.endswith("]")
    if bracketed:
        host_text = host_text[1:-1]

    try:
        parsed_ip = ip_address(host_text)
    except ValueError as error:
        raise EnvMalformedError(variable_name, SOCKET_ADDRESS_REASON) from error

    # IPv6 hosts must be bracketed, IPv4 hosts must not.
    if bracketed != isinstance(parsed_ip, IPv6Address):
        raise EnvMalformedError(variable_name, SOCKET_ADDRESS_REASON)

    port = int(port_text)
    if port > _PORT_MAX:
        raise EnvMalformedError(variable_name, SOCKET_ADDRESS_REASON)
    return SocketAddress(ip=parsed_ip, port=port)


def parse_guid(value: str, variable_name: str) -> UUID:
    """Parse one 128-bit unique identifier.

    Only the canonical hyphenated 8-4-4-4-12 form is accepted; braces, the
    `urn:uuid:` prefix and unhyphenated hex are rejected.

    Args:
        value: Raw text.
        variable_name: Variable named in the error payload.

    Returns:
        UUID: Parsed identifier.

    Raises:
        EnvMalformedError: Raised when the text is not valid GUID syntax.
    """

    if _GUID_PATTERN.fullmatch(value) is None:
        raise EnvMalformedError(variable_name, GUID_REASON)
    try:
        return UUID(value)
    except ValueError as error:
        raise EnvMalformedError(variable_name, GUID_REASON) from error


def parse_ip_address(value: str, variable_name: str) -> IPv4Address | IPv6Address:
    """Parse one IPv4 or IPv6 address.

    Args:
        value: Raw text.
        variable_name: Variable named in the error payload.

    Returns:
        IPv4Address | IPv6Address: Parsed address.

    Raises:
        EnvMalformedError: Raised when the text is not an IP address.
    """

    try:
        return ip_address(value)
    except ValueError as error:
        raise EnvMalformedError(variable_name, IP_ADDRESS_REASON) from error


def parse_database_url(value: str, variable_name: str) -> URL:
    """Parse one database URL such as `postgres://user:pw@host:5432/db`.

    Args:
        value: Raw text.
        variable_name: Variable named in the error payload.

    Returns:
        URL: Parsed SQLAlchemy URL.

    Raises:
        EnvMalformedError: Raised when the text is not a URL.
    """

    try:
        return make_url(value)
    except (ArgumentError, ValueError) as error:
        raise EnvMalformedError(variable_name, DATABASE_URL_REASON) from error


def parse_locale(value: str, variable_name: str) -> Locale:
    """Parse one POSIX locale identifier such as `en_US.UTF-8`.

    `C` and `POSIX`, with or without a `.codeset` or `@modifier` suffix, map
    to the `en_US_POSIX` locale. The locale parser can fail with arbitrary
    exception types on severely malformed input; every failure is converted
    to `EnvMalformedError`.

    Args:
        value: Raw text.
        variable_name: Variable named in the error payload.

    Returns:
        Locale: Parsed locale.

    Raises:
        EnvMalformedError: Raised for any locale parse failure.
    """

    locale_name = value.split(".", 1)[0].split("@", 1)[0]
    try:
        if locale_name in _POSIX_LOCALE_NAMES:
            return Locale.parse(POSIX_LOCALE_IDENTIFIER)
        return Locale.parse(value)
    except Exception as error:  # pylint: disable=broad-exception-caught
        logger.debug("Locale parser failed for %s with %s", variable_name, type(error).__name__)
        raise EnvMalformedError(variable_name, LOCALE_REASON) from error
