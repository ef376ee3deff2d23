"""Application services for templaar."""

from .catalog import CatalogEntry, TemplateCatalog, format_entries
from .creator import TemplateCreator
from .instantiator import TakeOutcome, TakeStatus, TemplateInstantiator
from .resolver import TemplateResolver

__all__ = [
    "CatalogEntry",
    "TakeOutcome",
    "TakeStatus",
    "TemplateCatalog",
    "TemplateCreator",
    "TemplateInstantiator",
    "TemplateResolver",
    "format_entries",
]
