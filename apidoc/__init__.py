"""apidoc: extract documentation data from JavaScript source trees."""

from .config import GenerationConfig, PluginDescriptor, load_config
from .errors import (
    ApidocError,
    ConfigError,
    ExtractionError,
    ParseError,
    PluginError,
    PublishError,
)
from .models import DocObject, GenerationResult
from .pipeline import Generator, generate
from .plugins import Plugin

__all__ = [
    "ApidocError",
    "ConfigError",
    "DocObject",
    "ExtractionError",
    "GenerationConfig",
    "GenerationResult",
    "Generator",
    "ParseError",
    "Plugin",
    "PluginDescriptor",
    "PluginError",
    "PublishError",
    "generate",
    "load_config",
]
