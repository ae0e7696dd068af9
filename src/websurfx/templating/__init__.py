"""Templating: kida environment and the startup-time template registry."""

from websurfx.templating.registry import TemplateRegistry, load_templates

__all__ = ["TemplateRegistry", "load_templates"]
