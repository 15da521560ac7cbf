"""Regression tests for application metadata and service lookups."""

from __future__ import annotations

import json
from dataclasses import dataclass
from uuid import UUID

import pytest
from pydantic import BaseModel, PydanticUserError

import cf_env
from cf_env import constants
from cf_env.domain import GenericService
from cf_env.errors import (
    EnvNotSetError,
    JsonMalformedError,
    ServiceNotPresentError,
    ServiceTypeNotPresentError,
)
from cf_env.interfaces import MappingEnvironmentReader


class _DatabaseCredentials(BaseModel):
    """Credential schema matching the test database binding."""

    host: str
    port: int
    username: str
    password: str


@dataclass
class _ApiKeyCredentials:
    """Credential schema that does not match the database binding."""

    api_key: str


def _build_service(name: str, credentials: object) -> dict[str, object]:
    """Build one deterministic service binding payload.

    Args:
        name: Service name.
        credentials: Credentials payload.

    Returns:
        dict[str, object]: JSON-compatible service record.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return {
        "binding_guid": "44ceb72f-100b-4f50-87a2-7809c8b42b8d",
        "binding_name": None,
        "instance_guid": "fe4e8ed4-e6c9-4b10-8f38-9d2d1e6f7a31",
        "instance_name": name,
        "name": name,
        "label": "postgres",
        "tags": ["postgres", "relational"],
        "plan": "small",
        "credentials": credentials,
        "syslog_drain_url": None,
        "volume_mounts": [{"container_dir": "/var/vcap/data", "device_type": "shared", "mode": "rw"}],
    }


def _build_services_json() -> str:
    """Build a deterministic `VCAP_SERVICES` document.

    Returns:
        str: JSON text with one postgres binding, one opaque binding and one empty bucket.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return json.dumps(
        {
            "postgres": [
                _build_service(
                    "my-db",
                    {"host": "10.0.0.5", "port": 5432, "username": "admin", "password": "secret"},
                )
            ],
            "user-provided": [
                _build_service("my-api", {"api_key": "abc", "nested": {"scopes": ["read", 1, None, True]}})
            ],
            "redis": [],
        }
    )


def _build_application_payload() -> dict[str, object]:
    """Build a deterministic `VCAP_APPLICATION` payload.

    Returns:
        dict[str, object]: JSON-compatible application payload.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return {
        "application_id": "fa05c1a9-0fc1-4fbd-bae1-139850dec7a3",
        "application_name": "ledger",
        "application_uris": ["ledger.example.com"],
        "application_version": "fb8fbcc6-8d58-479e-bcc7-3b4ce5a7f0ca",
        "cf_api": "https://api.example.com",
        "limits": {"disk": 1024, "fds": 16384, "mem": 512},
        "name": "ledger",
        "process_id": "fa05c1a9-0fc1-4fbd-bae1-139850dec7a3",
        "process_type": "web",
        "organization_id": "c0134a5f-3e7c-4e43-9d5e-0b1a6f1c9b10",
        "organization_name": "acme",
        "space_id": "06450c72-4669-4dc6-8096-45f9777db68a",
        "space_name": "production",
        "uris": ["ledger.example.com"],
        "version": "fb8fbcc6-8d58-479e-bcc7-3b4ce5a7f0ca",
        "host": "0.0.0.0",
    }


def _reader(**values: str) -> MappingEnvironmentReader:
    return MappingEnvironmentReader(values)


def test_accessors_is_cf_env_checks_presence_only() -> None:
    """Report presence of `VCAP_APPLICATION` regardless of its content.

    Returns:
        None: Assertions validate the presence check.

    Raises:
        AssertionError: Raised when the presence check parses content.
    """

    assert cf_env.is_cf_env(environment=_reader(VCAP_APPLICATION="{not json"))
    assert cf_env.is_cf_env(environment=_reader(VCAP_APPLICATION=""))
    assert not cf_env.is_cf_env(environment=_reader(VCAP_SERVICES="{}"))


def test_accessors_application_info_decodes_metadata() -> None:
    """Decode application metadata with optional timestamps absent.

    Returns:
        None: Assertions validate application decoding.

    Raises:
        AssertionError: Raised when decoding is incorrect.
    """

    application = cf_env.get_application_info(
        environment=_reader(VCAP_APPLICATION=json.dumps(_build_application_payload()))
    )

    assert application.application_id == UUID("fa05c1a9-0fc1-4fbd-bae1-139850dec7a3")
    assert application.limits.mem == 512
    assert application.uris == ["ledger.example.com"]
    assert application.started_at is None
    assert application == cf_env.Application.model_validate_json(json.dumps(_build_application_payload()))


@pytest.mark.parametrize(
    "mutation",
    [
        lambda payload: payload.pop("space_id"),
        lambda payload: payload.update(space_id="not-a-guid"),
        lambda payload: payload.update(limits={"disk": "1024", "fds": 1, "mem": 1}),
        lambda payload: payload.update(limits={"disk": -1, "fds": 1, "mem": 1}),
    ],
)
def test_accessors_application_info_schema_mismatch_is_json_malformed(mutation) -> None:
    """Report missing fields and wrong field types as malformed JSON.

    Args:
        mutation: Payload mutation producing a schema mismatch.

    Returns:
        None: Assertions validate schema failure classification.

    Raises:
        AssertionError: Raised when a schema mismatch is accepted.
    """

    payload = _build_application_payload()
    mutation(payload)

    with pytest.raises(JsonMalformedError) as error_info:
        cf_env.get_application_info(environment=_reader(VCAP_APPLICATION=json.dumps(payload)))

    assert error_info.value.source_label == constants.VCAP_APPLICATION


def test_accessors_services_decodes_all_buckets() -> None:
    """Decode every service type bucket with opaque credentials.

    Returns:
        None: Assertions validate service map decoding.

    Raises:
        AssertionError: Raised when decoding is incorrect.
    """

    services = cf_env.get_services(environment=_reader(VCAP_SERVICES=_build_services_json()))

    assert set(services) == {"postgres", "user-provided", "redis"}
    assert services["redis"] == []
    assert services["postgres"][0].credentials["port"] == 5432
    assert services["user-provided"][0].volume_mounts[0].mode == "rw"


@pytest.mark.parametrize("value", ["{not json", "[]", json.dumps({"postgres": [{"name": "my-db"}]})])
def test_accessors_services_malformed_document(value: str) -> None:
    """Report invalid JSON and envelope mismatches against `VCAP_SERVICES`.

    Args:
        value: Malformed services document.

    Returns:
        None: Assertions validate document failure classification.

    Raises:
        AssertionError: Raised when a malformed document is accepted.
    """

    with pytest.raises(JsonMalformedError) as error_info:
        cf_env.get_services(environment=_reader(VCAP_SERVICES=value))

    assert error_info.value.source_label == constants.VCAP_SERVICES


def test_accessors_service_by_name_types_credentials() -> None:
    """Decode a named service with the caller's credential schema.

    Returns:
        None: Assertions validate typed credential decoding.

    Raises:
        AssertionError: Raised when credentials are not typed.
    """

    service = cf_env.get_service_by_name(
        "my-db",
        _DatabaseCredentials,
        environment=_reader(VCAP_SERVICES=_build_services_json()),
    )

    assert isinstance(service.credentials, _DatabaseCredentials)
    assert service.credentials.port == 5432
    assert service.label == "postgres"
    assert service.binding_guid == UUID("44ceb72f-100b-4f50-87a2-7809c8b42b8d")


def test_accessors_service_by_name_defaults_to_opaque_credentials() -> None:
    """Keep credentials as JSON values when no schema is given.

    Returns:
        None: Assertions validate default credentials.

    Raises:
        AssertionError: Raised when default credentials change shape.
    """

    service = cf_env.get_service_by_name("my-api", environment=_reader(VCAP_SERVICES=_build_services_json()))

    assert service.credentials == {"api_key": "abc", "nested": {"scopes": ["read", 1, None, True]}}


def test_accessors_service_by_name_credentials_mismatch_uses_narrow_label() -> None:
    """Report a credential schema mismatch as `<name>.credentials`.

    Returns:
        None: Assertions validate narrow failure labels.

    Raises:
        AssertionError: Raised when the label is wrong.
    """

    with pytest.raises(JsonMalformedError) as error_info:
        cf_env.get_service_by_name(
            "my-db",
            _ApiKeyCredentials,
            environment=_reader(VCAP_SERVICES=_build_services_json()),
        )

    assert error_info.value.source_label == "my-db.credentials"


def test_accessors_service_by_name_absent_is_idempotent() -> None:
    """Report a missing service identically on repeated calls.

    Returns:
        None: Assertions validate absence classification and idempotence.

    Raises:
        AssertionError: Raised when repeated results differ.
    """

    environment = _reader(VCAP_SERVICES=_build_services_json())
    errors = []
    for _ in range(2):
        with pytest.raises(ServiceNotPresentError) as error_info:
            cf_env.get_service_by_name("missing", environment=environment)
        errors.append(error_info.value)

    assert errors[0] == errors[1]
    assert errors[0].service_name == "missing"
    assert cf_env.get_service_by_name("my-db", environment=environment) == cf_env.get_service_by_name(
        "my-db",
        environment=environment,
    )


def test_accessors_service_lookups_propagate_document_errors() -> None:
    """Propagate absence and malformed document errors from `get_services`.

    Returns:
        None: Assertions validate error propagation.

    Raises:
        AssertionError: Raised when document errors are masked.
    """

    with pytest.raises(EnvNotSetError):
        cf_env.get_service_by_name("my-db", environment=_reader())
    with pytest.raises(JsonMalformedError) as error_info:
        cf_env.get_services_by_type("postgres", environment=_reader(VCAP_SERVICES="{"))
    assert error_info.value.source_label == constants.VCAP_SERVICES


def test_accessors_services_by_type_types_whole_bucket() -> None:
    """Decode every record of one type with the caller's schema.

    Returns:
        None: Assertions validate bucket decoding.

    Raises:
        AssertionError: Raised when bucket decoding is incorrect.
    """

    environment = _reader(VCAP_SERVICES=_build_services_json())

    services = cf_env.get_services_by_type("postgres", _DatabaseCredentials, environment=environment)

    assert len(services) == 1
    assert services[0].credentials.username == "admin"
    assert cf_env.get_services_by_type("redis", _DatabaseCredentials, environment=environment) == []


def test_accessors_services_by_type_failures() -> None:
    """Distinguish a missing type from a credential schema mismatch.

    Returns:
        None: Assertions validate failure classification.

    Raises:
        AssertionError: Raised when failures are misclassified.
    """

    environment = _reader(VCAP_SERVICES=_build_services_json())

    with pytest.raises(JsonMalformedError) as malformed_info:
        cf_env.get_services_by_type("user-provided", _DatabaseCredentials, environment=environment)
    assert malformed_info.value.source_label == "user-provided.credentials"

    with pytest.raises(ServiceTypeNotPresentError) as absent_info:
        cf_env.get_services_by_type("mysql", environment=environment)
    assert absent_info.value.service_type_name == "mysql"


def test_accessors_generic_service_round_trip_preserves_credentials() -> None:
    """Encode and decode a generic service without losing credentials.

    Returns:
        None: Assertions validate round-trip equality.

    Raises:
        AssertionError: Raised when the round trip alters the record.
    """

    service = cf_env.get_services(environment=_reader(VCAP_SERVICES=_build_services_json()))["user-provided"][0]

    decoded_service = GenericService.model_validate_json(service.model_dump_json())

    assert decoded_service == service
    assert json.loads(decoded_service.model_dump_json())["credentials"] == json.loads(
        service.model_dump_json()
    )["credentials"]


class _UnsupportedCredentials:
    """Plain class pydantic cannot build a validation schema for."""


def test_accessors_service_lookups_surface_unsupported_credential_types() -> None:
    """Surface an unusable credential schema as a pydantic usage error.

    Returns:
        None: Assertions validate that caller programming errors are not
        reported as environment failures.

    Raises:
        AssertionError: Raised when the usage error is masked.
    """

    environment = _reader(VCAP_SERVICES=_build_services_json())

    with pytest.raises(PydanticUserError):
        cf_env.get_service_by_name("my-db", _UnsupportedCredentials, environment=environment)
    with pytest.raises(PydanticUserError):
        cf_env.get_services_by_type("postgres", _UnsupportedCredentials, environment=environment)
