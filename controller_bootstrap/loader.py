"""Locate and parse aws-sdk-go API model files.

Model trees are laid out as <model_root>/<service>/<version>/api-2.json.
Extracts the service identity fields and the operation catalog.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import ModelNotFoundError, ModelParseError

logger = logging.getLogger(__name__)

MODEL_FILENAME = "api-2.json"


@dataclass(frozen=True)
class ServiceModel:
    """Identity and operation catalog of one service API model."""

    service_id: str
    abbreviation: str
    full_name: str
    package_alias: str
    model_name: str
    model_version: str
    operation_names: tuple[str, ...]


def api_versions(service: str, model_root: Path) -> list[str]:
    """Return the sorted API versions found in a service's model directory."""
    api_path = Path(model_root) / service.lower()
    if not api_path.is_dir():
        raise ModelNotFoundError(
            f"no model directory for service {service!r} at {api_path}"
        )

    versions = []
    for entry in api_path.iterdir():
        # lstat: a symlink to a directory is still not a version directory
        if entry.is_symlink() or not entry.is_dir():
            raise ModelNotFoundError(
                f"found {entry.name} in {api_path}: expected to find only"
                " directories in api model directory but found non-directory"
            )
        versions.append(entry.name)

    if not versions:
        raise ModelNotFoundError(
            f"no valid version directories found for service {service!r} in {api_path}"
        )
    return sorted(versions)


def first_api_version(service: str, model_root: Path) -> str:
    """Return the first API version of a service (e.g. "2012-10-03").

    "First" is the lexicographically smallest directory name, not the oldest
    release: version names are not guaranteed to sort by date.
    """
    versions = api_versions(service, model_root)
    if len(versions) > 1:
        logger.info(
            "Service %s has %d model versions %s, using %s",
            service, len(versions), versions, versions[0],
        )
    return versions[0]


def find_model_path(
    service: str,
    model_root: Path,
    api_version: str | None = None,
) -> Path:
    """Return the path to a service's api-2.json file.

    The file itself is not checked here; extract_service_model reports a
    missing or broken file with a clearer error.
    """
    service = service.lower()
    version = api_version or first_api_version(service, model_root)
    model_path = Path(model_root) / service / version / MODEL_FILENAME
    logger.info("Using model %s", model_path)
    return model_path


def load_model(path: Path) -> dict[str, Any]:
    """Load a model file from disk."""
    try:
        with open(path, encoding="utf-8") as f:
            model = json.load(f)
    except FileNotFoundError as exc:
        raise ModelParseError(
            f"model file {path} not found, please re-try specifying the service model name"
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ModelParseError(f"unable to read model file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ModelParseError(f"model file {path} is not valid JSON: {exc}") from exc

    if not isinstance(model, dict):
        raise ModelParseError(f"model file {path} does not contain a JSON object")
    return model


def get_metadata(model: dict[str, Any], path: Path) -> dict[str, Any]:
    """Extract the metadata block from a model."""
    metadata = model.get("metadata")
    if not isinstance(metadata, dict):
        raise ModelParseError(f"model file {path} has no metadata block")
    return metadata


def get_operation_names(model: dict[str, Any], path: Path) -> list[str]:
    """Return the model's operation names, sorted.

    Operations whose definition is not an object are skipped.
    """
    operations = model.get("operations")
    if not isinstance(operations, dict):
        raise ModelParseError(f"model file {path} has no operations block")

    names = []
    for name, operation in operations.items():
        if not isinstance(operation, dict):
            logger.warning("Skipping unsupported operation %s in %s", name, path)
            continue
        names.append(name)
    return sorted(names)


def extract_service_model(
    model_path: Path,
    service_alias: str,
    model_name: str = "",
) -> ServiceModel:
    """Parse a model file into a ServiceModel.

    The package alias always comes from the caller, never from the file.
    """
    model_path = Path(model_path)
    model = load_model(model_path)
    metadata = get_metadata(model, model_path)
    operation_names = get_operation_names(model, model_path)

    service = ServiceModel(
        service_id=str(metadata.get("serviceId") or ""),
        abbreviation=str(metadata.get("serviceAbbreviation") or ""),
        full_name=str(metadata.get("serviceFullName") or ""),
        package_alias=service_alias.lower(),
        model_name=(model_name or service_alias).lower(),
        model_version=model_path.parent.name,
        operation_names=tuple(operation_names),
    )
    logger.info(
        "Loaded %s (%s) with %d operations",
        service.service_id or service.package_alias,
        service.model_version,
        len(operation_names),
    )
    return service
