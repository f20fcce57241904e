"""CLI command modules for create-typed-vite-react."""

from .init import register_init_command

__all__ = ["register_init_command"]
