"""Build the Jinja2 template context for a bootstrap run.

Merges the extracted service model, the derived resource names and the
caller's options into one read-only RenderContext. Every template in the run
renders against the same context.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .errors import ConfigError
from .loader import ServiceModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BootstrapOptions:
    """Already-parsed caller options for one run."""

    service_alias: str
    model_name: str = ""
    api_version: str | None = None
    sdk_version: str = ""
    runtime_version: str = ""
    output_path: str = ""
    dry_run: bool = False
    existing_repo: bool = False

    @property
    def service_identifier(self) -> str:
        """Model directory name to look up: the model name, else the alias."""
        return (self.model_name or self.service_alias).lower()


@dataclass(frozen=True)
class RenderContext:
    service: ServiceModel
    resource_names: tuple[str, ...]
    output_path: str
    existing_repo: bool
    dry_run: bool
    sdk_version: str
    runtime_version: str
    model_name_override: str

    def template_vars(self) -> dict[str, Any]:
        """Flatten the context into the variables templates can reference."""
        return {
            "service_id": self.service.service_id,
            "service_package_name": self.service.package_alias,
            "service_model_name": self.service.model_name,
            "service_abbreviation": self.service.abbreviation,
            "service_full_name": self.service.full_name,
            "model_version": self.service.model_version,
            "operation_names": list(self.service.operation_names),
            "crd_names": list(self.resource_names),
            "aws_sdk_go_version": self.sdk_version,
            "runtime_version": self.runtime_version,
            "existing_controller": self.existing_repo,
        }


def validate_options(options: BootstrapOptions) -> None:
    """Reject option combinations that cannot produce a run."""
    if not options.service_alias:
        raise ConfigError("please specify the AWS service alias to generate template files")
    if not options.dry_run and not options.output_path:
        raise ConfigError(
            "an output path is required unless --dry-run is set"
        )


def build_context(
    service: ServiceModel,
    resource_names: list[str],
    options: BootstrapOptions,
) -> RenderContext:
    """Build the render context for one run."""
    validate_options(options)

    context = RenderContext(
        service=service,
        resource_names=tuple(resource_names),
        output_path=options.output_path,
        existing_repo=options.existing_repo,
        dry_run=options.dry_run,
        sdk_version=options.sdk_version,
        runtime_version=options.runtime_version,
        model_name_override=options.model_name.lower(),
    )
    logger.debug("Render context for %s: %s", service.package_alias, context.template_vars())
    return context
