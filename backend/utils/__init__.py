"""Utility modules."""

from .parser import (
    dump_list,
    extract_json,
    load_list,
    parse_role_details_response,
    parse_roles_response,
)

__all__ = [
    "extract_json",
    "parse_roles_response",
    "parse_role_details_response",
    "dump_list",
    "load_list",
]
