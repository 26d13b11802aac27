"""Load descriptors from YAML or JSON files.

Example ``fixtures.yaml``:

    config.json:
      type: file
      data: "{}"
    logs:
      type: dir
      children:
        app.log:
          type: file
"""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from fixture_tree.descriptors import DescriptorError, DirDescriptor, FileDescriptor, parse_descriptor

__all__ = ["SUPPORTED_SUFFIXES", "load_descriptor"]

SUPPORTED_SUFFIXES = (".yaml", ".yml", ".json")


def load_descriptor(path: Path) -> FileDescriptor | DirDescriptor:
    """Load and validate a descriptor file.

    The document is either a tagged root node or a bare children mapping
    for the root directory.

    Args:
        path: Path to a .yaml, .yml or .json file.

    Returns:
        The validated descriptor.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        DescriptorError: If the file type is unsupported, the document
            cannot be parsed, or it is not a valid descriptor.
    """
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise DescriptorError(
            f"Unsupported descriptor file type '{path.suffix}': {path}"
        )

    text = path.read_text()
    try:
        if suffix == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (ValueError, yaml.YAMLError) as e:
        raise DescriptorError(f"Could not parse descriptor file {path}: {e}") from e

    if data is None:
        raise DescriptorError(f"Descriptor file is empty: {path}")

    return parse_descriptor(data)
