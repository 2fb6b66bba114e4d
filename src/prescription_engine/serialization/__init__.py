"""Serialization module — JSON documents for templates and scaled views."""

from prescription_engine.serialization.json_codec import (
    scaled_to_dict,
    scaled_to_json_string,
    template_from_dict,
    template_from_json_string,
    template_to_dict,
    template_to_json_string,
)

__all__ = [
    "scaled_to_dict",
    "scaled_to_json_string",
    "template_from_dict",
    "template_from_json_string",
    "template_to_dict",
    "template_to_json_string",
]
