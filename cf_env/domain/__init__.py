"""Domain models and pure parsers for platform environment values."""

from .memory import ByteUnit, MemoryLimit, parse_memory_limit
from .models import Application, ApplicationLimits, GenericService, Service, ServiceMap, ServiceVolumeMount
from .parsing import (
    SocketAddress,
    parse_database_url,
    parse_guid,
    parse_ip_address,
    parse_locale,
    parse_port,
    parse_socket_address,
    parse_unsigned_integer,
)
from .vcap import domain_retype_service, domain_retype_services, parse_application, parse_service_map

__all__ = [
    "Application",
    "ApplicationLimits",
    "ByteUnit",
    "GenericService",
    "MemoryLimit",
    "Service",
    "ServiceMap",
    "ServiceVolumeMount",
    "SocketAddress",
    "domain_retype_service",
    "domain_retype_services",
    "parse_application",
    "parse_database_url",
    "parse_guid",
    "parse_ip_address",
    "parse_locale",
    "parse_memory_limit",
    "parse_port",
    "parse_service_map",
    "parse_socket_address",
    "parse_unsigned_integer",
]
