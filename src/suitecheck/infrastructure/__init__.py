"""Infrastructure: runtime introspection helpers."""

from suitecheck.infrastructure.call_site import describe_call_site, nice_func_name, nice_func_path

__all__ = [
    "describe_call_site",
    "nice_func_name",
    "nice_func_path",
]
