"""Middleware package."""

from .dry_run_header import DryRunHeaderMiddleware
from .exception_handler import ExceptionHandlers, register_exception_handlers
from .opa_middleware import opa_middleware_config
from .options import OpaMiddlewareOptions, ResolvedOptions, merge_options, resolve_options

__all__ = [
    "DryRunHeaderMiddleware",
    "ExceptionHandlers",
    "register_exception_handlers",
    "opa_middleware_config",
    "OpaMiddlewareOptions",
    "ResolvedOptions",
    "merge_options",
    "resolve_options",
]
