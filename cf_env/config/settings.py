"""Point-in-time snapshot of platform variables with dotenv support."""

from __future__ import annotations

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from cf_env import constants


class SnapshotLoadError(RuntimeError):
    """Raised when the environment snapshot cannot be loaded."""


class CfEnvSnapshot(BaseSettings):
    """Raw values of every named platform variable captured in one read.

    Variable names are matched case-sensitively. Values stay raw strings; typed
    parsing happens in the accessors that consume the snapshot, so a malformed
    value is still reported per variable. Pass the snapshot as the
    `environment` argument of any accessor to get a consistent view across
    several reads.

    Attributes:
        cf_instance_addr: Raw `CF_INSTANCE_ADDR`.
        cf_instance_guid: Raw `CF_INSTANCE_GUID`.
        cf_instance_index: Raw `CF_INSTANCE_INDEX`.
        cf_instance_ip: Raw `CF_INSTANCE_IP`.
        cf_instance_internal_ip: Raw `CF_INSTANCE_INTERNAL_IP`.
        cf_instance_port: Raw `CF_INSTANCE_PORT`.
        database_url: Raw `DATABASE_URL`.
        home: Raw `HOME`.
        lang: Raw `LANG`.
        memory_limit: Raw `MEMORY_LIMIT`.
        port: Raw `PORT`.
        pwd: Raw `PWD`.
        tmpdir: Raw `TMPDIR`.
        user: Raw `USER`.
        vcap_application: Raw `VCAP_APPLICATION` JSON document.
        vcap_services: Raw `VCAP_SERVICES` JSON document.
    """

    model_config = SettingsConfigDict(
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        frozen=True,
    )

    cf_instance_addr: str | None = Field(default=None, alias=constants.CF_INSTANCE_ADDR)
    cf_instance_guid: str | None = Field(default=None, alias=constants.CF_INSTANCE_GUID)
    cf_instance_index: str | None = Field(default=None, alias=constants.CF_INSTANCE_INDEX)
    cf_instance_ip: str | None = Field(default=None, alias=constants.CF_INSTANCE_IP)
    cf_instance_internal_ip: str | None = Field(default=None, alias=constants.CF_INSTANCE_INTERNAL_IP)
    cf_instance_port: str | None = Field(default=None, alias=constants.CF_INSTANCE_PORT)
    database_url: str | None = Field(default=None, alias=constants.DATABASE_URL)
    home: str | None = Field(default=None, alias=constants.HOME)
    lang: str | None = Field(default=None, alias=constants.LANG)
    memory_limit: str | None = Field(default=None, alias=constants.MEMORY_LIMIT)
    port: str | None = Field(default=None, alias=constants.PORT)
    pwd: str | None = Field(default=None, alias=constants.PWD)
    tmpdir: str | None = Field(default=None, alias=constants.TMPDIR)
    user: str | None = Field(default=None, alias=constants.USER)
    vcap_application: str | None = Field(default=None, alias=constants.VCAP_APPLICATION)
    vcap_services: str | None = Field(default=None, alias=constants.VCAP_SERVICES)

    def env_read(self, name: str) -> str | None:
        """Return the captured raw value for one variable.

        Args:
            name: Case-sensitive variable name.

        Returns:
            str | None: Captured value, or None when it was not set or is not
            one of the named platform variables.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return self.model_dump(by_alias=True).get(name)


def config_load_snapshot(env_file: str | None = None) -> CfEnvSnapshot:
    """Capture the named platform variables from the environment and dotenv.

    Args:
        env_file: Optional dotenv path. Process environment values take
            precedence over dotenv values.

    Returns:
        CfEnvSnapshot: Frozen snapshot of raw values.

    Raises:
        SnapshotLoadError: Raised when the settings sources cannot be read.
    """

    try:
        return CfEnvSnapshot(_env_file=env_file)
    except ValidationError as error:
        raise SnapshotLoadError(
            f"Environment snapshot could not be loaded. Check environment variables or dotenv file. Details: {error}"
        ) from error
