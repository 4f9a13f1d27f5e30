"""HTTP routes for session composition."""
from .routes import router

__all__ = ["router"]
