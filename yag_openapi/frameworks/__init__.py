"""Framework-specific type builders."""

from yag_openapi.frameworks.base import FrameworkTypeBuilder
from yag_openapi.frameworks.elysia import ElysiaTypeBuilder, RouteTree
from yag_openapi.frameworks.hono import HonoTypeBuilder

__all__ = [
    'FrameworkTypeBuilder',
    'HonoTypeBuilder',
    'ElysiaTypeBuilder',
    'RouteTree',
]
