"""Names of the platform environment variables read by accessors."""

from __future__ import annotations

from typing import Final

CF_INSTANCE_ADDR: Final[str] = "CF_INSTANCE_ADDR"
CF_INSTANCE_GUID: Final[str] = "CF_INSTANCE_GUID"
CF_INSTANCE_INDEX: Final[str] = "CF_INSTANCE_INDEX"
CF_INSTANCE_IP: Final[str] = "CF_INSTANCE_IP"
CF_INSTANCE_INTERNAL_IP: Final[str] = "CF_INSTANCE_INTERNAL_IP"
CF_INSTANCE_PORT: Final[str] = "CF_INSTANCE_PORT"
DATABASE_URL: Final[str] = "DATABASE_URL"
HOME: Final[str] = "HOME"
LANG: Final[str] = "LANG"
MEMORY_LIMIT: Final[str] = "MEMORY_LIMIT"
PORT: Final[str] = "PORT"
PWD: Final[str] = "PWD"
TMPDIR: Final[str] = "TMPDIR"
USER: Final[str] = "USER"
VCAP_APPLICATION: Final[str] = "VCAP_APPLICATION"
VCAP_SERVICES: Final[str] = "VCAP_SERVICES"

CF_ENV_VARIABLE_NAMES: Final[tuple[str, ...]] = (
    CF_INSTANCE_ADDR,
    CF_INSTANCE_GUID,
    CF_INSTANCE_INDEX,
    CF_INSTANCE_IP,
    CF_INSTANCE_INTERNAL_IP,
    CF_INSTANCE_PORT,
    DATABASE_URL,
    HOME,
    LANG,
    MEMORY_LIMIT,
    PORT,
    PWD,
    TMPDIR,
    USER,
    VCAP_APPLICATION,
    VCAP_SERVICES,
)
