from .dict_merge import deep_update
from .logging import configure_logging, logger

__all__ = ["deep_update", "configure_logging", "logger"]
