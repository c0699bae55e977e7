"""Adapters package: CLI entry points and user interfaces."""

__all__: list[str] = []
