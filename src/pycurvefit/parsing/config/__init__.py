"""Configuration parsing and YAML key definitions."""

from .model_yaml_parser import ModelYAMLParser, YAMLFileParser, BaseFileParser
from . import yaml_keys as _yk

# Re-export everything defined in yaml_keys.__all__
globals().update({k: getattr(_yk, k) for k in _yk.__all__})

__all__ = [
    "ModelYAMLParser",
    "YAMLFileParser",
    "BaseFileParser",
    *_yk.__all__,
]
