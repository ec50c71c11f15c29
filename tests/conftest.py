"""Shared fixtures: on-disk model trees and template trees under tmp_path."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest


ECR_METADATA: dict[str, Any] = {
    "apiVersion": "2015-09-21",
    "protocol": "json",
    "serviceAbbreviation": "Amazon ECR",
    "serviceFullName": "Amazon EC2 Container Registry",
    "serviceId": "ECR",
}

ECR_OPERATIONS = [
    "CreateRepository",
    "CreatePullThroughCacheRule",
    "BatchGetImage",
    "CreateBatchRepositories",
    "DescribeRepositories",
    "DeleteRepository",
    "PutLifecyclePolicy",
]


def write_model(
    model_root: Path,
    service: str,
    version: str,
    operations: list[str],
    metadata: dict[str, Any] | None = None,
) -> Path:
    """Write a minimal api-2.json under model_root/service/version."""
    version_dir = model_root / service / version
    version_dir.mkdir(parents=True, exist_ok=True)
    model = {
        "version": "2.0",
        "metadata": dict(ECR_METADATA if metadata is None else metadata),
        "operations": {
            name: {"name": name, "http": {"method": "POST", "requestUri": "/"}}
            for name in operations
        },
        "shapes": {},
    }
    path = version_dir / "api-2.json"
    path.write_text(json.dumps(model, indent=2))
    return path


@pytest.fixture
def model_root(tmp_path: Path) -> Path:
    """A model tree holding one ECR model version."""
    root = tmp_path / "models" / "apis"
    write_model(root, "ecr", "2015-09-21", ECR_OPERATIONS)
    return root


@pytest.fixture
def make_templates(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Return a builder that writes {relative path: content} into a template tree."""
    def _make(files: dict[str, str]) -> Path:
        root = tmp_path / "template"
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        root.mkdir(parents=True, exist_ok=True)
        return root
    return _make


@pytest.fixture
def template_root(make_templates) -> Path:
    """A small controller template tree with descriptive and source files."""
    return make_templates({
        "README.md.tpl": "# {{ service_full_name }}\n{% for crd in crd_names %}- {{ crd }}\n{% endfor %}",
        "OWNERS.tpl": "approvers:\n  - {{ service_package_name }}-team\n",
        "OWNERS_ALIASES.tpl": "aliases: {}\n",
        "go.mod.tpl": "module github.com/aws-controllers-k8s/{{ service_package_name }}-controller\n"
                      "require github.com/aws/aws-sdk-go {{ aws_sdk_go_version }}\n",
        "cmd/controller/main.go.tpl": "package main // {{ service_id }} {{ runtime_version }}\n",
        "config/static.yaml": "kind: Static\n",
    })


def snapshot(root: Path) -> dict[str, bytes]:
    """Map every file under root (relative posix path) to its bytes."""
    if not root.exists():
        return {}
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }
