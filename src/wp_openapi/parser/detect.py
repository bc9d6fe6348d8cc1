"""Auto-detect the kind of API document a file holds."""

import json
from pathlib import Path

import yaml


def detect_format(file_path: Path) -> str:
    """Detect whether a file is a WordPress index or an existing Swagger doc.

    Returns: 'wordpress', 'swagger', or 'unknown'.
    """
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        return "unknown"

    # Try JSON first: WordPress escapes slashes, which YAML may reject
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, ValueError):
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError:
            return "unknown"

    if isinstance(data, dict):
        if "openapi" in data or "swagger" in data:
            return "swagger"
        if "routes" in data:
            return "wordpress"
    return "unknown"
