# Core package initialization
# Configuration, logging, exceptions and HTTP helpers shared by all layers

from . import api_utils, config, exceptions, logging_config

__all__ = [
    "api_utils",
    "config",
    "exceptions",
    "logging_config",
]
