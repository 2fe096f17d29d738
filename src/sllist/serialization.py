"""
Serialization helpers for linked lists.

Provides lossless JSON/YAML round-trip via an intermediate dict:

    {"values": [0, 1, 5, 2, 3], "size": 5}

`size` is informational. When it disagrees with the number of values a
UserWarning is emitted and the values win.
"""
from __future__ import annotations

import json
import warnings
from typing import Any, Dict

import yaml

from sllist.linked_list import LinkedList


class SerializationError(Exception):
    """Raised when serialized list data cannot be decoded."""
    pass


def list_to_dict(lst: LinkedList) -> Dict[str, Any]:
    return {"values": lst.to_list(), "size": lst.size}


def list_from_dict(d: Any) -> LinkedList:
    if not isinstance(d, dict):
        raise SerializationError(f"Expected a mapping, got {type(d).__name__}")
    if "values" not in d:
        raise SerializationError("Missing required key: values")

    values = d["values"]
    if values is None:
        values = []
    if not isinstance(values, list):
        raise SerializationError(f"'values' must be a list, got {type(values).__name__}")

    bad = [v for v in values if isinstance(v, bool) or not isinstance(v, int)]
    if bad:
        raise SerializationError(f"Non-integer values: {bad}")

    declared = d.get("size")
    if declared is not None and declared != len(values):
        warnings.warn(
            f"Declared size {declared} does not match {len(values)} values; using values",
            UserWarning,
        )

    return LinkedList.from_iterable(values)


def list_to_json(lst: LinkedList) -> str:
    return json.dumps(list_to_dict(lst), sort_keys=True)


def list_from_json(s: str) -> LinkedList:
    try:
        d = json.loads(s)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {str(e)}")
    return list_from_dict(d)


def list_to_yaml(lst: LinkedList) -> str:
    return yaml.safe_dump(list_to_dict(lst))


def list_from_yaml(s: str) -> LinkedList:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise SerializationError(f"Invalid YAML: {str(e)}")
    return list_from_dict(d)


def save_list_file(lst: LinkedList, filename: str) -> None:
    """
    Write a list to disk. The format follows the extension:
    .json for JSON, anything else for YAML.
    """
    if str(filename).endswith(".json"):
        text = list_to_json(lst)
    else:
        text = list_to_yaml(lst)
    with open(filename, 'w') as f:
        f.write(text)


def load_list_file(filename: str) -> LinkedList:
    """Read a list written by save_list_file."""
    with open(filename) as f:
        text = f.read()
    if str(filename).endswith(".json"):
        return list_from_json(text)
    return list_from_yaml(text)
