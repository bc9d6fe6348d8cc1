"""WordPress REST API index parser.

Reads a dump of ``/wp-json`` (JSON, or YAML for hand-written fixtures)
into a WordPressSchema model.
"""

import json
from pathlib import Path

import yaml

from .base import WordPressSchema


def parse_wordpress(file_path: Path) -> WordPressSchema:
    """Parse a WordPress index file into a WordPressSchema."""
    text = file_path.read_text(encoding="utf-8")
    return WordPressSchema.model_validate(load_document(text, file_path.suffix))


def load_document(text: str, suffix: str = ".json") -> dict:
    """Decode a JSON or YAML document that must be a mapping."""
    if suffix.lower() == ".json":
        doc = json.loads(text)
    else:
        doc = yaml.safe_load(text)

    if not isinstance(doc, dict):
        raise ValueError(f"expected a mapping at the document root, got {type(doc).__name__}")
    return doc
