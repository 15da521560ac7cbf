"""Decoding of `VCAP_APPLICATION` and `VCAP_SERVICES` JSON documents.

Service credentials are decoded in two passes. The first pass decodes the whole
`VCAP_SERVICES` document with opaque JSON credentials, so the envelope always
decodes regardless of the provider's credential schema. The second pass
re-encodes selected records and decodes them again with the caller's
credential schema, which fails with a `<label>.credentials` error distinct from
a malformed document.
"""

from __future__ import annotations

from typing import Any, Final

from pydantic import JsonValue, TypeAdapter, ValidationError

from cf_env.errors import JsonMalformedError

from .models import Application, GenericService, Service, ServiceMap

CREDENTIALS_LABEL_SUFFIX: Final[str] = ".credentials"

_SERVICE_MAP_ADAPTER: Final[TypeAdapter[ServiceMap]] = TypeAdapter(ServiceMap)
_GENERIC_SERVICE_LIST_ADAPTER: Final[TypeAdapter[list[GenericService]]] = TypeAdapter(list[GenericService])


def parse_application(value: str, variable_name: str) -> Application:
    """Decode one `VCAP_APPLICATION` document.

    Args:
        value: Raw JSON text.
        variable_name: Variable named in the error payload.

    Returns:
        Application: Decoded application metadata.

    Raises:
        JsonMalformedError: Raised for invalid JSON or a schema mismatch.
    """

    try:
        return Application.model_validate_json(value)
    except ValidationError as error:
        raise JsonMalformedError(variable_name) from error


def parse_service_map(value: str, variable_name: str) -> ServiceMap:
    """Decode one `VCAP_SERVICES` document with opaque credentials.

    Args:
        value: Raw JSON text.
        variable_name: Variable named in the error payload.

    Returns:
        ServiceMap: Service type name to ordered service records.

    Raises:
        JsonMalformedError: Raised for invalid JSON or an envelope mismatch.
    """

    try:
        return _SERVICE_MAP_ADAPTER.validate_json(value)
    except ValidationError as error:
        raise JsonMalformedError(variable_name) from error


def domain_credentials_label(key: str) -> str:
    """Return the error label for a credentials sub-document."""

    return f"{key}{CREDENTIALS_LABEL_SUFFIX}"


def domain_retype_service(service: GenericService, credentials_type: Any = JsonValue) -> Service[Any]:
    """Decode one generic service record again with a credential schema.

    Args:
        service: Record decoded with opaque credentials.
        credentials_type: Credential schema, any type pydantic can validate.

    Returns:
        Service[Any]: Record with credentials of `credentials_type`.

    Raises:
        JsonMalformedError: Raised as `<service name>.credentials` when the
            credentials do not match the schema.
        PydanticSchemaGenerationError: Raised when pydantic cannot build a
            schema for `credentials_type`; this is a caller programming error,
            not an environment failure.
    """

    service_json = service.model_dump_json()
    try:
        return Service[credentials_type].model_validate_json(service_json)
    except ValidationError as error:
        raise JsonMalformedError(domain_credentials_label(service.name)) from error


def domain_retype_services(
    services: list[GenericService],
    label: str,
    credentials_type: Any = JsonValue,
) -> list[Service[Any]]:
    """Decode a list of generic service records again in one pass.

    Args:
        services: Records decoded with opaque credentials.
        label: Prefix of the `<label>.credentials` error label.
        credentials_type: Credential schema, any type pydantic can validate.

    Returns:
        list[Service[Any]]: Records in input order with typed credentials.

    Raises:
        JsonMalformedError: Raised when any record's credentials do not match.
        PydanticSchemaGenerationError: Raised when pydantic cannot build a
            schema for `credentials_type`; this is a caller programming error,
            not an environment failure.
    """

    services_json = _GENERIC_SERVICE_LIST_ADAPTER.dump_json(services)
    try:
        return TypeAdapter(list[Service[credentials_type]]).validate_json(services_json)
    except ValidationError as error:
        raise JsonMalformedError(domain_credentials_label(label)) from error
