"""Project-native typed exceptions for environment accessor failures.

Every accessor either returns its typed value or raises exactly one subclass of
`CfEnvError`. Payload attributes always name the offending variable (or derived
label such as `<name>.credentials`) so callers can branch on which input is
broken.
"""

from __future__ import annotations

from .error_codes import CfEnvErrorCode, cf_env_error_category, cf_env_error_message


class CfEnvError(Exception):
    """Base exception for environment accessor failures.

    Attributes:
        error_code: Closed failure kind for this error.
    """

    error_code: CfEnvErrorCode

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def error_payload(self) -> dict[str, str]:
        """Return a structured representation suitable for logging.

        Returns:
            dict[str, str]: Error code, category, message and payload
            attributes.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        payload = {
            "error_code": self.error_code.value,
            "error_category": cf_env_error_category(self.error_code.value),
            "message": self.message,
        }
        payload.update(self._error_payload_attributes())
        return payload

    def _error_payload_attributes(self) -> dict[str, str]:
        return {}

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.error_payload() == other.error_payload()

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.error_payload().items())))


class EnvNotSetError(CfEnvError, LookupError):
    """Named environment variable is absent."""

    error_code = CfEnvErrorCode.ENV_NOT_SET

    def __init__(self, variable_name: str):
        super().__init__(cf_env_error_message(self.error_code.value, variable_name=variable_name))
        self.variable_name = variable_name

    def _error_payload_attributes(self) -> dict[str, str]:
        return {"variable_name": self.variable_name}


class EnvMalformedError(CfEnvError, ValueError):
    """Named environment variable is present but does not parse.

    Attributes:
        variable_name: Offending variable name.
        reason: Stable, documented description of the expected shape.
    """

    error_code = CfEnvErrorCode.ENV_MALFORMED

    def __init__(self, variable_name: str, reason: str):
        super().__init__(
            cf_env_error_message(self.error_code.value, variable_name=variable_name, reason=reason)
        )
        self.variable_name = variable_name
        self.reason = reason

    def _error_payload_attributes(self) -> dict[str, str]:
        return {"variable_name": self.variable_name, "reason": self.reason}


class JsonMalformedError(CfEnvError, ValueError):
    """JSON document is invalid or does not match the requested schema.

    Attributes:
        source_label: Variable name or `<key>.credentials` sub-document label.
    """

    error_code = CfEnvErrorCode.JSON_MALFORMED

    def __init__(self, source_label: str):
        super().__init__(cf_env_error_message(self.error_code.value, source_label=source_label))
        self.source_label = source_label

    def _error_payload_attributes(self) -> dict[str, str]:
        return {"source_label": self.source_label}


class ServiceNotPresentError(CfEnvError, LookupError):
    """No bound service carries the requested name."""

    error_code = CfEnvErrorCode.SERVICE_NOT_PRESENT

    def __init__(self, service_name: str):
        super().__init__(cf_env_error_message(self.error_code.value, service_name=service_name))
        self.service_name = service_name

    def _error_payload_attributes(self) -> dict[str, str]:
        return {"service_name": self.service_name}


class ServiceTypeNotPresentError(CfEnvError, LookupError):
    """The requested service type bucket is absent from VCAP_SERVICES."""

    error_code = CfEnvErrorCode.SERVICE_TYPE_NOT_PRESENT

    def __init__(self, service_type_name: str):
        super().__init__(
            cf_env_error_message(self.error_code.value, service_type_name=service_type_name)
        )
        self.service_type_name = service_type_name

    def _error_payload_attributes(self) -> dict[str, str]:
        return {"service_type_name": self.service_type_name}


class UnknownMemoryUnitError(CfEnvError, ValueError):
    """Trailing memory unit character is not one of G, g, M, m."""

    error_code = CfEnvErrorCode.UNKNOWN_MEMORY_UNIT

    def __init__(self) -> None:
        super().__init__(cf_env_error_message(self.error_code.value))
