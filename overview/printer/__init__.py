"""Object summary printer and its default generators."""

from .events import events_gen
from .metadata import metadata_gen
from .object import ItemDescriptor, ItemFunc, Object, Options, plugin_config_gen
from .pod_template import pod_template_gen

__all__ = [
    "Object",
    "Options",
    "ItemDescriptor",
    "ItemFunc",
    "metadata_gen",
    "pod_template_gen",
    "events_gen",
    "plugin_config_gen",
]
