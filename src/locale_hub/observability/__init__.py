from .logging_config import PanelRenderer, setup_logging, setup_logging_from_config

__all__ = ["PanelRenderer", "setup_logging", "setup_logging_from_config"]
