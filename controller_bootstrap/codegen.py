"""Render the template tree and write (or preview) the generated repository.

Takes the context from context_builder and produces the controller files
under the output path, mirroring the template tree's layout.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

import jinja2

from .context_builder import RenderContext
from .errors import TemplateError
from .naming import pluralize, singularize, snake_case
from .writer import write_file

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_SUFFIX = ".tpl"

# The only files refreshed in an existing controller repository.
DESCRIPTIVE_FILES: frozenset[str] = frozenset({
    "README.md",
    "OWNERS",
    "OWNERS_ALIASES",
    "CODE_OF_CONDUCT.md",
    "CONTRIBUTING.md",
    "GOVERNANCE.md",
    "SECURITY.md",
    "NOTICE",
})

_BANNER = "============================="


@dataclass(frozen=True)
class RenderedFile:
    """A rendered template and its path relative to the output root."""

    path: Path
    content: bytes


def destination_path(template: Path) -> Path:
    """Strip the template suffix from a template's relative path."""
    name = template.name
    if name.endswith(TEMPLATE_SUFFIX) and name != TEMPLATE_SUFFIX:
        return template.with_name(name[: -len(TEMPLATE_SUFFIX)])
    return template


def list_templates(template_root: Path, existing_repo: bool = False) -> list[Path]:
    """Return template paths relative to the root, sorted.

    For an existing repository only the descriptive files are listed.
    """
    template_root = Path(template_root)
    if not template_root.is_dir():
        raise TemplateError(f"template directory {template_root} not found")

    templates = sorted(
        p.relative_to(template_root)
        for p in template_root.rglob("*")
        if not p.is_dir()
    )
    if existing_repo:
        templates = [
            t for t in templates
            if destination_path(t).as_posix() in DESCRIPTIVE_FILES
        ]
    return templates


def _environment(template_root: Path) -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(template_root)),
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        autoescape=False,
    )
    env.filters["pluralize"] = pluralize
    env.filters["singularize"] = singularize
    env.filters["snake_case"] = snake_case
    return env


def render_templates(
    template_root: Path,
    context: RenderContext,
) -> Iterator[RenderedFile]:
    """Render each template against the context, one file at a time."""
    template_root = Path(template_root)
    env = _environment(template_root)
    variables = context.template_vars()

    for template_path in list_templates(template_root, context.existing_repo):
        name = template_path.as_posix()
        try:
            template = env.get_template(name)
            output = template.render(**variables)
        except jinja2.TemplateSyntaxError as exc:
            raise TemplateError(
                f"syntax error in template {name} (line {exc.lineno}): {exc.message}"
            ) from exc
        except jinja2.UndefinedError as exc:
            raise TemplateError(f"undefined variable in template {name}: {exc.message}") from exc
        except jinja2.TemplateNotFound as exc:
            raise TemplateError(f"template {name} cannot be read") from exc
        except jinja2.TemplateError as exc:
            raise TemplateError(f"error in template {name}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise TemplateError(f"template {name} is not valid UTF-8") from exc
        except Exception as exc:
            # filters and expressions can raise anything
            raise TemplateError(f"error rendering template {name}: {exc}") from exc

        logger.debug("Rendered %s", name)
        yield RenderedFile(path=destination_path(template_path), content=output.encode("utf-8"))


def print_rendered(rendered: RenderedFile) -> None:
    """Print one rendered file under a header naming it."""
    print(f"{_BANNER} {rendered.path.as_posix()} {_BANNER}=========")
    print(rendered.content.decode("utf-8").strip())


def generate(template_root: Path, context: RenderContext) -> list[Path]:
    """Render the template tree and write it under the context's output path.

    In a dry run every file is printed and nothing is written. Returns the
    written paths (relative paths for a dry run).

    All templates are rendered before the first write, so a template error
    leaves the output tree untouched. A write error can still leave it
    partially updated.
    """
    rendered = list(render_templates(template_root, context))

    if context.dry_run:
        for item in rendered:
            print_rendered(item)
        return [item.path for item in rendered]

    output_root = Path(context.output_path)
    written = []
    for item in rendered:
        out_path = output_root / item.path
        write_file(out_path, item.content)
        written.append(out_path)

    logger.info("Wrote %d files to %s", len(written), output_root)
    return written
