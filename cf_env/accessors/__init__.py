"""Accessor functions, one per platform variable."""

from .scalar import (
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
    get_tmp_dir,
    get_user,
)
from .vcap import get_application_info, get_service_by_name, get_services, get_services_by_type, is_cf_env

__all__ = [
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
