"""Static knowledge about the Qt style sheet dialect."""

from qsslint.registry.properties import (
    PROPERTIES,
    PSEUDO_STATES,
    SUB_CONTROLS,
    PropertySpec,
    ValueShape,
    known_pseudo_states,
    known_sub_controls,
    lookup_property,
)
from qsslint.registry.shapes import value_matches

__all__ = [
    "PROPERTIES",
    "PSEUDO_STATES",
    "SUB_CONTROLS",
    "PropertySpec",
    "ValueShape",
    "known_pseudo_states",
    "known_sub_controls",
    "lookup_property",
    "value_matches",
]
