from .coordinator import Coordinator

__all__ = ["Coordinator"]
