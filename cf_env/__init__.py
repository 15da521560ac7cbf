"""Typed access to Cloud Foundry runtime environment variables.

Provides bound services (optionally looked up by name or type, with typed
credentials), application metadata, and the instance variables set by the
platform, most of them prefixed with `CF_`.
"""

import logging

from .accessors import (
    get_application_info,
    get_database_url,
    get_home,
    get_instance_address,
    get_instance_guid,
    get_instance_index,
    get_instance_internal_ip,
    get_instance_ip,
    get_instance_port,
    get_lang,
    get_memory_limit,
    get_port,
    get_pwd,
    get_service_by_name,
    get_services,
    get_services_by_type,
    get_tmp_dir,
    get_user,
    is_cf_env,
)
from .config import CfEnvSnapshot, SnapshotLoadError, config_load_snapshot
from .domain import (
    Application,
    ApplicationLimits,
    ByteUnit,
    GenericService,
    MemoryLimit,
    Service,
    ServiceMap,
    ServiceVolumeMount,
    SocketAddress,
)
from .error_codes import CfEnvErrorCode
from .errors import (
    CfEnvError,
    EnvMalformedError,
    EnvNotSetError,
    JsonMalformedError,
    ServiceNotPresentError,
    ServiceTypeNotPresentError,
    UnknownMemoryUnitError,
)
from .interfaces import EnvironmentReaderPort, MappingEnvironmentReader, ProcessEnvironmentReader

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Application",
    "ApplicationLimits",
    "ByteUnit",
    "CfEnvError",
    "CfEnvErrorCode",
    "CfEnvSnapshot",
    "EnvMalformedError",
    "EnvNotSetError",
    "EnvironmentReaderPort",
    "GenericService",
    "JsonMalformedError",
    "MappingEnvironmentReader",
    "MemoryLimit",
    "ProcessEnvironmentReader",
    "Service",
    "ServiceMap",
    "ServiceNotPresentError",
    "ServiceTypeNotPresentError",
    "ServiceVolumeMount",
    "SnapshotLoadError",
    "SocketAddress",
    "UnknownMemoryUnitError",
    "config_load_snapshot",
    "get_application_info",
    "get_database_url",
    "get_home",
    "get_instance_address",
    "get_instance_guid",
    "get_instance_index",
    "get_instance_internal_ip",
    "get_instance_ip",
    "get_instance_port",
    "get_lang",
    "get_memory_limit",
    "get_port",
    "get_pwd",
    "get_service_by_name",
    "get_services",
    "get_services_by_type",
    "get_tmp_dir",
    "get_user",
    "is_cf_env",
]
