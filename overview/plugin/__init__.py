"""Plugin printer contract and the manager that fans out to plugins."""

from .interface import PluginPrinter, PrintResponse
from .manager import PluginManager, validate_response

__all__ = ["PluginPrinter", "PrintResponse", "PluginManager", "validate_response"]
