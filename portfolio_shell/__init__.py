"""portfolio_shell package: virtual filesystem and terminal shell for the Portfolio OS desktop.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
