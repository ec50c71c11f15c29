"""Entry point: python -m controller_bootstrap generate <service>

Reads the service's API model, renders the bundled templates into a new (or existing)
ACK service controller repository.
"""

from __future__ import annotations

import argparse
import logging
import signal
import sys
from pathlib import Path

from .codegen import TEMPLATE_DIR, generate
from .context_builder import BootstrapOptions, build_context, validate_options
from .errors import BootstrapError
from .loader import extract_service_model, find_model_path
from .naming import derive_resource_names
from .sdk_repo import DEFAULT_CACHE_DIR, ensure_sdk_repo, model_root

logger = logging.getLogger("controller_bootstrap")

APP_NAME = "controller-bootstrap"
APP_SHORT_DESC = "controller-bootstrap initializes a new ACK service controller repository"


def bootstrap(
    options: BootstrapOptions,
    models: Path,
    template_root: Path = TEMPLATE_DIR,
) -> list[Path]:
    """Run the pipeline: locate, extract, derive, build, render, write."""
    validate_options(options)
    model_path = find_model_path(options.service_identifier, models, options.api_version)
    service = extract_service_model(model_path, options.service_alias, options.model_name)
    resource_names = derive_resource_names(service.operation_names)
    logger.info("Found %d resources: %s", len(resource_names), ", ".join(resource_names))
    context = build_context(service, resource_names, options)
    return generate(template_root, context)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=APP_NAME, description=APP_SHORT_DESC)
    parser.add_argument("--verbose", action="store_true", help="log pipeline progress")
    parser.add_argument("--debug", action="store_true", help="log per-file details")
    subparsers = parser.add_subparsers(dest="command", required=True)

    gen = subparsers.add_parser(
        "generate",
        help="generate template files in an ACK service controller repository",
    )
    gen.add_argument("service_alias", help="AWS service alias, e.g. ecr")
    gen.add_argument(
        "-o", "--output", default="",
        help="path to ACK service controller directory to bootstrap",
    )
    gen.add_argument("-v", "--aws-sdk-go-version", default="", help="aws-sdk-go version")
    gen.add_argument(
        "-r", "--runtime-version", default="",
        help="aws-controllers-k8s/runtime version",
    )
    gen.add_argument(
        "-m", "--model-name", default="",
        help="service model name of the supplied service alias",
    )
    gen.add_argument(
        "-d", "--dry-run", action="store_true",
        help="output files to stdout instead of writing them",
    )
    gen.add_argument(
        "-e", "--existing-controller", action="store_true",
        help="update the project description files of an existing controller",
    )
    gen.add_argument(
        "--api-version", default=None,
        help="API model version to use (default: first version found)",
    )
    gen.add_argument(
        "--template-dir", type=Path, default=TEMPLATE_DIR,
        help="directory of controller templates",
    )
    gen.add_argument(
        "--model-root", type=Path, default=None,
        help="directory of <service>/<version>/api-2.json models (skips the aws-sdk-go clone)",
    )
    gen.add_argument(
        "--cache-dir", type=Path, default=DEFAULT_CACHE_DIR,
        help="cache directory for the aws-sdk-go clone",
    )
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    level = logging.WARNING
    if args.verbose:
        level = logging.INFO
    if args.debug:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _interrupt(signum, frame):
    """SIGTERM handler: stop the run the same way Ctrl-C does."""
    raise KeyboardInterrupt


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args)

    options = BootstrapOptions(
        service_alias=args.service_alias,
        model_name=args.model_name,
        api_version=args.api_version,
        sdk_version=args.aws_sdk_go_version,
        runtime_version=args.runtime_version,
        output_path=args.output,
        dry_run=args.dry_run,
        existing_repo=args.existing_controller,
    )

    previous_handler = signal.signal(signal.SIGTERM, _interrupt)
    try:
        validate_options(options)
        models = args.model_root
        if models is None:
            models = model_root(ensure_sdk_repo(args.cache_dir))
        written = bootstrap(options, models, args.template_dir)
    except BootstrapError as exc:
        logger.debug("Run failed with %s", exc.code)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("interrupted", file=sys.stderr)
        return 130
    finally:
        if previous_handler is not None:
            signal.signal(signal.SIGTERM, previous_handler)

    if not options.dry_run:
        print(f"Generated {len(written)} files in {options.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
