"""Schema loading and payload validation for puzzle inputs."""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Tuple

import jsonschema

from .errors import PayloadValidationError, ValidationIssue

_REPO_ROOT = Path(__file__).resolve().parents[2]
_CONTRACT_ROOT = _REPO_ROOT / "PuzzleContracts"
_CATALOG_PATH = _CONTRACT_ROOT / "catalog.json"


@dataclass(frozen=True)
class SchemaDescriptor:
    """Descriptor describing a schema entry from the catalog."""

    artifact_type: str
    version: str
    schema_id: str
    schema_path: str


_catalog_cache: Dict[str, SchemaDescriptor] | None = None
_schema_cache: Dict[Tuple[str, str], Dict[str, Any]] = {}
_compiled_cache: Dict[str, Any] = {}


def load_catalog() -> Dict[str, SchemaDescriptor]:
    """Load and cache the schema catalog."""

    global _catalog_cache
    if _catalog_cache is not None:
        return _catalog_cache

    raw_catalog = json.loads(_CATALOG_PATH.read_text("utf-8"))
    catalog: Dict[str, SchemaDescriptor] = {}
    for artifact_type, payload in raw_catalog.items():
        catalog[artifact_type] = SchemaDescriptor(
            artifact_type=artifact_type,
            version=payload["version"],
            schema_id=payload["schema_id"],
            schema_path=payload["schema_path"],
        )
    _catalog_cache = catalog
    return catalog


def get_descriptor(artifact_type: str) -> SchemaDescriptor:
    """Return the :class:`SchemaDescriptor` for *artifact_type*."""

    catalog = load_catalog()
    if artifact_type not in catalog:
        raise KeyError(f"Unknown artifact type: {artifact_type}")
    return catalog[artifact_type]


def load_schema(artifact_type: str) -> Dict[str, Any]:
    """Load the JSON schema registered for *artifact_type*."""

    descriptor = get_descriptor(artifact_type)
    resolved = (_CONTRACT_ROOT / descriptor.schema_path).resolve()
    if not resolved.is_relative_to(_CONTRACT_ROOT.resolve()):
        raise ValueError("Schema path escapes the contracts directory")

    cache_key = (descriptor.schema_id, descriptor.schema_path)
    if cache_key not in _schema_cache:
        schema = json.loads(resolved.read_text("utf-8"))
        if "$id" in schema and schema["$id"] != descriptor.schema_id:
            raise ValueError(
                f"Schema id mismatch: catalog has {descriptor.schema_id!r}, "
                f"schema has {schema['$id']!r}"
            )
        _schema_cache[cache_key] = schema
    return copy.deepcopy(_schema_cache[cache_key])


def _compile(artifact_type: str) -> Any:
    if artifact_type not in _compiled_cache:
        schema = load_schema(artifact_type)
        jsonschema.Draft202012Validator.check_schema(schema)
        _compiled_cache[artifact_type] = jsonschema.Draft202012Validator(schema)
    return _compiled_cache[artifact_type]


def _format_path(error: jsonschema.ValidationError) -> str:
    parts = ["$"]
    for part in error.absolute_path:
        parts.append(f"[{part}]" if isinstance(part, int) else f".{part}")
    return "".join(parts)


def collect_issues(payload: Any, artifact_type: str = "Arrangement") -> List[ValidationIssue]:
    """Return every schema violation in *payload*, ordered by location."""

    validator = _compile(artifact_type)
    errors = sorted(validator.iter_errors(payload), key=lambda err: list(map(str, err.absolute_path)))
    return [ValidationIssue(path=_format_path(err), msg=err.message) for err in errors]


def validate_payload(payload: Any, artifact_type: str = "Arrangement") -> None:
    """Raise :class:`PayloadValidationError` when *payload* breaks its schema."""

    issues = collect_issues(payload, artifact_type)
    if issues:
        raise PayloadValidationError(artifact_type, issues)


__all__ = [
    "SchemaDescriptor",
    "collect_issues",
    "get_descriptor",
    "load_catalog",
    "load_schema",
    "validate_payload",
]
