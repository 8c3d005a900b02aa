"""
Template discovery and resolution.

Provides:
- Discovery of template directories and their template.yaml metadata
- An immutable registry of template identifiers and a resolver over it
"""

from create_cave_app.templates.discovery import TemplateInfo, dirs_of, load_template_info
from create_cave_app.templates.registry import TemplateRegistry, build_registry, resolve

__all__ = [
    "TemplateInfo",
    "dirs_of",
    "load_template_info",
    "TemplateRegistry",
    "build_registry",
    "resolve",
]
