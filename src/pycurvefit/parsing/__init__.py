"""
Parsing and configuration modules for pycurvefit.

This package handles YAML parsing of model definitions, loading of sample data
files, and model creation from configuration files.
"""

from .api import create_model, get_model_info, get_supported_methods, validate_yaml_file
from .config.model_yaml_parser import ModelYAMLParser
from .io.data_handler import load_sample_data

__all__ = [
    'create_model',
    'get_model_info',
    'get_supported_methods',
    'validate_yaml_file',
    'ModelYAMLParser',
    'load_sample_data',
]
