"""
Input validation helpers for GitHub tool arguments.

Every reader raises ValidationError before any request is made, so a
rejected call never reaches the network.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any


class ValidationError(Exception):
  pass


_HEX_COLOR_RE = re.compile(r"^[0-9a-fA-F]{6}$")

MAX_PAGE_SIZE = 100


def _is_number(v: Any) -> bool:
  return isinstance(v, (int, float)) and not isinstance(v, bool)


def _as_int(v: Any, key: str) -> int:
  if not _is_number(v) or (isinstance(v, float) and not v.is_integer()):
    raise ValidationError(f"Invalid {key}: must be an integer.")
  return int(v)


def req_string(args: dict[str, Any], key: str) -> str:
  """Read a required, non-empty string from args."""
  v = args.get(key)
  if not isinstance(v, str) or not v.strip():
    raise ValidationError(f"Missing required parameter: {key}")
  return v.strip()


def req_text(args: dict[str, Any], key: str) -> str:
  """Read a required free-text field (comment or review body), unmodified."""
  v = args.get(key)
  if not isinstance(v, str) or not v.strip():
    raise ValidationError(f"Missing required parameter: {key}")
  return v


def opt_string(args: dict[str, Any], key: str) -> str | None:
  """Read an optional string from args. Blank strings are kept as given."""
  v = args.get(key)
  if v is None:
    return None
  if not isinstance(v, str):
    raise ValidationError(f"Invalid {key}: must be a string.")
  return v


def opt_keyword(args: dict[str, Any], key: str = "keyword") -> str | None:
  """Read an optional free-text filter; blank means no filter."""
  v = opt_string(args, key)
  if v is None or not v.strip():
    return None
  return v.strip()


def opt_boolean(args: dict[str, Any], key: str) -> bool | None:
  """Read an optional boolean from args."""
  v = args.get(key)
  if v is None:
    return None
  if not isinstance(v, bool):
    raise ValidationError(f"Invalid {key}: must be a boolean.")
  return v


def opt_string_list(
  args: dict[str, Any],
  key: str,
  min_items: int = 0,
) -> list[str] | None:
  """Read an optional list of strings from args."""
  v = args.get(key)
  if v is None:
    if min_items:
      raise ValidationError(f"Missing required parameter: {key}")
    return None
  if not isinstance(v, list) or not all(isinstance(item, str) for item in v):
    raise ValidationError(f"Invalid {key}: must be a list of strings.")
  if len(v) < min_items:
    raise ValidationError(f"Invalid {key}: at least {min_items} item(s) required.")
  return list(v)


def req_string_list(args: dict[str, Any], key: str, min_items: int = 1) -> list[str]:
  items = opt_string_list(args, key, min_items=min_items)
  assert items is not None
  return items


def validate_positive_int(value: Any, param_name: str) -> int:
  """Validate a positive integer parameter."""
  if value is None:
    raise ValidationError(f"Missing required parameter: {param_name}")
  iv = _as_int(value, param_name)
  if iv <= 0:
    raise ValidationError(f"Invalid {param_name}: must be a positive integer.")
  return iv


def req_positive_int(args: dict[str, Any], key: str) -> int:
  return validate_positive_int(args.get(key), key)


def opt_positive_int(args: dict[str, Any], key: str) -> int | None:
  if args.get(key) is None:
    return None
  return validate_positive_int(args.get(key), key)


def opt_limit(
  args: dict[str, Any],
  default: int,
  maximum: int = MAX_PAGE_SIZE,
  key: str = "limit",
) -> int:
  """Read a page size, applying the default and enforcing 1..maximum."""
  if args.get(key) is None:
    return default
  limit = validate_positive_int(args.get(key), key)
  if limit > maximum:
    raise ValidationError(f"Invalid {key}: must be at most {maximum}.")
  return limit


def opt_enum(
  args: dict[str, Any],
  key: str,
  choices: Sequence[str],
  default: str | None = None,
) -> str | None:
  """Read an optional value restricted to one of choices."""
  v = args.get(key)
  if v is None:
    return default
  if v not in choices:
    raise ValidationError(f"Invalid {key}: '{v}'. Expected one of: {', '.join(choices)}")
  return v


def req_enum(args: dict[str, Any], key: str, choices: Sequence[str]) -> str:
  if args.get(key) is None:
    raise ValidationError(f"Missing required parameter: {key}")
  value = opt_enum(args, key, choices)
  assert value is not None
  return value


def opt_hex_color(args: dict[str, Any], key: str = "color") -> str | None:
  """Read an optional 6-digit hex color (no leading '#')."""
  v = opt_string(args, key)
  if v is None:
    return None
  if not _HEX_COLOR_RE.match(v):
    raise ValidationError(f"Invalid {key}: '{v}'. Expected 6 hex digits, e.g. 'ff0000'.")
  return v


def opt_object_list(args: dict[str, Any], key: str) -> list[dict[str, Any]] | None:
  """Read an optional list of objects; each item is validated by the caller."""
  v = args.get(key)
  if v is None:
    return None
  if not isinstance(v, list) or not all(isinstance(item, dict) for item in v):
    raise ValidationError(f"Invalid {key}: must be a list of objects.")
  return v
