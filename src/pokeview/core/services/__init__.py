"""Servicios del Core (estado de sesión y orquestación)."""

from pokeview.core.services.session import SessionHooks, SessionState

__all__ = ["SessionHooks", "SessionState"]
