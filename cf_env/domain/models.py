"""Typed application and service binding models decoded from platform JSON.

All models are frozen and validated in strict mode against JSON input, so a
JSON string where an integer is required fails decoding instead of being
coerced. Unknown JSON keys are ignored.
"""

from __future__ import annotations

from typing import Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, JsonValue, NonNegativeInt

CredentialsT = TypeVar("CredentialsT")

_MODEL_CONFIG = ConfigDict(frozen=True, strict=True, extra="ignore")


class ApplicationLimits(BaseModel):
    """Resource limits assigned to the application.

    Attributes:
        disk: Disk quota in megabytes.
        fds: File descriptor limit.
        mem: Memory quota in megabytes.
    """

    model_config = _MODEL_CONFIG

    disk: NonNegativeInt
    fds: NonNegativeInt
    mem: NonNegativeInt


class Application(BaseModel):
    """Deployment metadata from `VCAP_APPLICATION`.

    Attributes:
        application_id: Application GUID.
        application_name: Application name.
        application_uris: Routes mapped to the application.
        application_version: Application version GUID.
        cf_api: Platform API endpoint.
        limits: Resource limits.
        name: Application name.
        process_id: Process identifier.
        process_type: Process type, for example `web`.
        organization_id: Organization GUID.
        organization_name: Organization name.
        space_id: Space GUID.
        space_name: Space name.
        start: Optional start time.
        started_at: Optional start time.
        started_at_timestamp: Optional start timestamp.
        state_timestamp: Optional last state change timestamp.
        uris: Routes mapped to the application.
        version: Process version GUID.
    """

    model_config = _MODEL_CONFIG

    application_id: UUID
    application_name: str
    application_uris: list[str]
    application_version: UUID
    cf_api: str
    limits: ApplicationLimits
    name: str
    process_id: str
    process_type: str
    organization_id: UUID
    organization_name: str
    space_id: UUID
    space_name: str
    start: str | None = None
    started_at: str | None = None
    started_at_timestamp: str | None = None
    state_timestamp: str | None = None
    uris: list[str]
    version: UUID


class ServiceVolumeMount(BaseModel):
    """Volume mounted into the container by a service binding."""

    model_config = _MODEL_CONFIG

    container_dir: str
    device_type: str
    mode: str


class Service(BaseModel, Generic[CredentialsT]):
    """Bound service record from `VCAP_SERVICES`.

    Everything except `credentials` is the provider-independent envelope.
    `credentials` is typed by the caller-chosen credential schema; the opaque
    default is `Service[JsonValue]` (see `GenericService`).

    Attributes:
        binding_guid: Binding GUID.
        binding_name: Optional binding name.
        instance_guid: Service instance GUID.
        instance_name: Service instance name.
        name: Binding name used for lookups.
        label: Service offering label.
        tags: Offering and instance tags.
        plan: Service plan name.
        credentials: Provider-defined credentials payload.
        syslog_drain_url: Optional syslog drain URL.
        volume_mounts: Volume mounts for the binding.
    """

    model_config = _MODEL_CONFIG

    binding_guid: UUID
    binding_name: str | None = None
    instance_guid: UUID
    instance_name: str
    name: str
    label: str
    tags: list[str]
    plan: str
    credentials: CredentialsT
    syslog_drain_url: str | None = None
    volume_mounts: list[ServiceVolumeMount]


GenericService = Service[JsonValue]

ServiceMap = dict[str, list[GenericService]]
