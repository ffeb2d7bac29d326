"""file_explorer package: interactive file explorer shell with a persistent activity log.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
