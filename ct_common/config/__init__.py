"""Configuration helpers for ct_common."""

from .env import parse_bool_env, parse_float_env, parse_id_list, parse_int_env

__all__ = [
    "parse_bool_env",
    "parse_float_env",
    "parse_id_list",
    "parse_int_env",
]
