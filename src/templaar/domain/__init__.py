"""Domain model for templaar templates."""

from .errors import (
    AmbiguousTemplateError,
    ConfigurationError,
    EditorLaunchError,
    EditorNotConfiguredError,
    InvalidTemplateError,
    PathExistsError,
    TemplaarError,
    TemplateExistsError,
    TemplateNotFoundError,
)
from .template import TEMPLATE_SUFFIX, Scope, TemplateLocation, decode_name, encode_name, is_template_path

__all__ = [
    "AmbiguousTemplateError",
    "ConfigurationError",
    "EditorLaunchError",
    "EditorNotConfiguredError",
    "InvalidTemplateError",
    "PathExistsError",
    "Scope",
    "TEMPLATE_SUFFIX",
    "TemplaarError",
    "TemplateExistsError",
    "TemplateLocation",
    "TemplateNotFoundError",
    "decode_name",
    "encode_name",
    "is_template_path",
]
