"""Canonical error-code semantics for environment accessor failures."""

from __future__ import annotations

from enum import Enum
from typing import Final


class CfEnvErrorCode(str, Enum):
    """Closed set of failure kinds shared by every accessor."""

    ENV_NOT_SET = "ENV_NOT_SET"
    ENV_MALFORMED = "ENV_MALFORMED"
    JSON_MALFORMED = "JSON_MALFORMED"
    SERVICE_NOT_PRESENT = "SERVICE_NOT_PRESENT"
    SERVICE_TYPE_NOT_PRESENT = "SERVICE_TYPE_NOT_PRESENT"
    UNKNOWN_MEMORY_UNIT = "UNKNOWN_MEMORY_UNIT"


CF_ENV_ERROR_MESSAGE_TEMPLATES: Final[dict[str, str]] = {
    CfEnvErrorCode.ENV_NOT_SET.value: 'environment variable "{variable_name}" is not set',
    CfEnvErrorCode.ENV_MALFORMED.value: (
        'the env variable "{variable_name}" does not match the required criteria. "{reason}"'
    ),
    CfEnvErrorCode.JSON_MALFORMED.value: 'the json from "{source_label}" could not be parsed',
    CfEnvErrorCode.SERVICE_NOT_PRESENT.value: 'service "{service_name}" is not present in VCAP_SERVICES',
    CfEnvErrorCode.SERVICE_TYPE_NOT_PRESENT.value: (
        'service type "{service_type_name}" is not present in VCAP_SERVICES'
    ),
    CfEnvErrorCode.UNKNOWN_MEMORY_UNIT.value: "memory unit unknown",
}

CF_ENV_LOOKUP_CODES: Final[frozenset[str]] = frozenset(
    {
        CfEnvErrorCode.ENV_NOT_SET.value,
        CfEnvErrorCode.SERVICE_NOT_PRESENT.value,
        CfEnvErrorCode.SERVICE_TYPE_NOT_PRESENT.value,
    }
)

CF_ENV_MALFORMED_CODES: Final[frozenset[str]] = frozenset(
    set(CF_ENV_ERROR_MESSAGE_TEMPLATES.keys()) - set(CF_ENV_LOOKUP_CODES)
)


def cf_env_error_message(error_code: str, **payload: str) -> str:
    """Render the canonical message for one error code.

    Args:
        error_code: Error code value.
        **payload: Template values such as `variable_name` or `reason`.

    Returns:
        str: Rendered message text.

    Raises:
        KeyError: Raised when the code is unknown or a template value is missing.
    """

    return CF_ENV_ERROR_MESSAGE_TEMPLATES[error_code].format(**payload)


def cf_env_error_category(error_code: str) -> str:
    """Classify one error code as a missing input or a malformed input.

    Args:
        error_code: Error code value.

    Returns:
        str: `missing` for lookup failures, `malformed` for parse failures.

    Raises:
        ValueError: Raised when the code is unknown.
    """

    if error_code in CF_ENV_LOOKUP_CODES:
        return "missing"
    if error_code in CF_ENV_MALFORMED_CODES:
        return "malformed"
    raise ValueError(f"unknown error code: {error_code}")
