"""Accessors for application metadata and bound services.

`get_services` decodes `VCAP_SERVICES` with opaque credentials. The by-name and
by-type lookups build on it and decode the selected records a second time with
the caller's credential schema.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import JsonValue

from cf_env import constants
from cf_env.domain import (
    Application,
    Service,
    ServiceMap,
    domain_retype_service,
    domain_retype_services,
    parse_application,
    parse_service_map,
)
from cf_env.errors import ServiceNotPresentError, ServiceTypeNotPresentError
from cf_env.interfaces import EnvironmentReaderPort, env_resolve_reader

from ._common import accessor_read_parsed

logger = logging.getLogger(__name__)


def is_cf_env(*, environment: EnvironmentReaderPort | None = None) -> bool:
    """Return whether `VCAP_APPLICATION` is set.

    The value is not parsed, so malformed JSON still counts as present.

    Args:
        environment: Optional reader; the process environment when omitted.

    Returns:
        bool: True when running on the platform.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return env_resolve_reader(environment).env_read(constants.VCAP_APPLICATION) is not None


def get_application_info(*, environment: EnvironmentReaderPort | None = None) -> Application:
    """Return `VCAP_APPLICATION` as typed application metadata.

    Args:
        environment: Optional reader; the process environment when omitted.

    Returns:
        Application: Decoded application metadata.

    Raises:
        EnvNotSetError: Raised when the variable is absent.
        JsonMalformedError: Raised for invalid JSON or a schema mismatch.
    """

    return accessor_read_parsed(constants.VCAP_APPLICATION, parse_application, environment)


def get_services(*, environment: EnvironmentReaderPort | None = None) -> ServiceMap:
    """Return `VCAP_SERVICES` as service records keyed by service type.

    Credentials stay opaque JSON values.

    Args:
        environment: Optional reader; the process environment when omitted.

    Returns:
        ServiceMap: Service type name to ordered service records.

    Raises:
        EnvNotSetError: Raised when the variable is absent.
        JsonMalformedError: Raised for invalid JSON or an envelope mismatch.
    """

    return accessor_read_parsed(constants.VCAP_SERVICES, parse_service_map, environment)


def get_service_by_name(
    name: str,
    credentials_type: Any = JsonValue,
    *,
    environment: EnvironmentReaderPort | None = None,
) -> Service[Any]:
    """Return one bound service by its name with typed credentials.

    Credential formats are defined by each service provider, so the schema is
    chosen by the caller. Any type pydantic can validate works, for example a
    `BaseModel` subclass:

        class DatabaseCredentials(BaseModel):
            host: str
            port: int
            username: str
            password: str

        service = get_service_by_name("my-db", DatabaseCredentials)
        service.credentials.port

    Without a schema, credentials stay opaque JSON values:

        service = get_service_by_name("my-db")
        service.credentials["uri"]

    All service types are searched. When several types contain a service with
    the same name, which one is returned is implementation-defined; callers
    must not rely on it.

    Args:
        name: Service name to look up.
        credentials_type: Credential schema for the returned record.
        environment: Optional reader; the process environment when omitted.

    Returns:
        Service[Any]: Matching record with credentials of `credentials_type`.

    Raises:
        EnvNotSetError: Raised when `VCAP_SERVICES` is absent.
        JsonMalformedError: Raised as `VCAP_SERVICES` for a malformed document,
            or as `<name>.credentials` when the credentials do not match.
        ServiceNotPresentError: Raised when no service has this name.
        PydanticSchemaGenerationError: Raised when `credentials_type` is not
            a type pydantic can validate. This signals a programming error in
            the caller and is not converted to `CfEnvError`.
    """

    services = get_services(environment=environment)
    for service_type_name, service_records in services.items():
        for service in service_records:
            if service.name != name:
                continue
            logger.debug("Resolved service %s under type %s", name, service_type_name)
            return domain_retype_service(service, credentials_type)

    logger.debug("Service %s is not present", name)
    raise ServiceNotPresentError(name)


def get_services_by_type(
    type_name: str,
    credentials_type: Any = JsonValue,
    *,
    environment: EnvironmentReaderPort | None = None,
) -> list[Service[Any]]:
    """Return every bound service of one type with typed credentials.

    A type present with an empty list returns an empty list; a type missing
    from the document raises `ServiceTypeNotPresentError`.

    Args:
        type_name: Service type key in `VCAP_SERVICES`, for example `postgres`.
        credentials_type: Credential schema for the returned records.
        environment: Optional reader; the process environment when omitted.

    Returns:
        list[Service[Any]]: Records in document order.

    Raises:
        EnvNotSetError: Raised when `VCAP_SERVICES` is absent.
        JsonMalformedError: Raised as `VCAP_SERVICES` for a malformed document,
            or as `<type_name>.credentials` when any credentials do not match.
        ServiceTypeNotPresentError: Raised when the type key is absent.
        PydanticSchemaGenerationError: Raised when `credentials_type` is not
            a type pydantic can validate. This signals a programming error in
            the caller and is not converted to `CfEnvError`.
    """

    services = get_services(environment=environment)
    service_records = services.get(type_name)
    if service_records is None:
        logger.debug("Service type %s is not present", type_name)
        raise ServiceTypeNotPresentError(type_name)
    return domain_retype_services(service_records, type_name, credentials_type)
