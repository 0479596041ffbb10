"""Command line interface for visual-builder.

Subcommands:
    registry    List registered component types
    frameworks  List export frameworks
    templates   List built-in layout templates
    tree        Print a component forest as a text tree
    validate    Validate a JSON component forest
    export      Export a component forest as framework code, factory config or JSON
"""

import argparse
import json
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from visual_builder.config import get_log_level
from visual_builder.core import get_logger, setup_logging
from visual_builder.exporters import (
    ComponentImportError,
    ExportError,
    ExportOptions,
    import_components,
    list_frameworks,
    pascal_case,
)
from visual_builder.mid import ComponentNode, validate_tree
from visual_builder.output import OutputGenerator, format_component_tree
from visual_builder.schema import (
    get_categories,
    get_definition,
    list_by_category,
    list_component_types,
)
from visual_builder.templates import (
    get_template,
    get_templates_by_category,
    instantiate_template,
    list_templates,
    search_templates,
)

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")


class InputError(Exception):
    """Raised when the forest to operate on cannot be loaded."""


# =============================================================================
# Input loading
# =============================================================================


def load_components(args: argparse.Namespace) -> list[ComponentNode]:
    """Load the forest named by ``--template`` or ``--input``.

    Raises:
        InputError: If the template is unknown or the file is unreadable.
        ComponentImportError: If the file is not a valid component forest.
    """
    template_id = getattr(args, "template", None)
    if template_id:
        if get_template(template_id) is None:
            available = ", ".join(t.id for t in list_templates())
            raise InputError(f"Unknown template '{template_id}'. Available: {available}")
        return instantiate_template(template_id)

    path: Path = args.input
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise InputError(f"Cannot read {path}: {e}") from e
    return import_components(text)


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--template",
        "-t",
        type=str,
        default=None,
        help="Built-in template id",
    )
    source.add_argument(
        "--input",
        "-i",
        type=Path,
        default=None,
        help="JSON file holding a component forest",
    )


# =============================================================================
# Listing Commands
# =============================================================================


def cmd_registry(args: argparse.Namespace) -> int:
    """Handle the registry command."""
    if args.category:
        matches = [c for c in get_categories() if c.lower() == args.category.lower()]
        if not matches:
            logger.error(f"Unknown category: {args.category}")
            logger.info(f"Available categories: {', '.join(get_categories())}")
            return 1
        definitions = list_by_category(matches[0])
    else:
        definitions = [get_definition(t) for t in list_component_types()]

    if args.json:
        print(json.dumps([d.to_dict() for d in definitions], indent=2))
        return 0

    for definition in definitions:
        container = " (container)" if definition.accepts_children else ""
        print(
            f"{definition.type:<12} {definition.name:<14} "
            f"{definition.category.value}{container}"
        )
    return 0


def cmd_frameworks(_args: argparse.Namespace) -> int:
    """Handle the frameworks command."""
    for name in list_frameworks():
        print(name)
    return 0


def cmd_templates(args: argparse.Namespace) -> int:
    """Handle the templates command."""
    templates = get_templates_by_category(args.category or "all")
    if args.search:
        matched = {t.id for t in search_templates(args.search)}
        templates = [t for t in templates if t.id in matched]

    if not templates:
        logger.warning("No templates match")
        return 0

    for template in templates:
        print(
            f"{template.id:<14} {template.name:<18} "
            f"[{template.category}] {template.description}"
        )
    return 0


# =============================================================================
# Forest Commands
# =============================================================================


def cmd_tree(args: argparse.Namespace) -> int:
    """Handle the tree command."""
    try:
        components = load_components(args)
    except (InputError, ComponentImportError) as e:
        logger.error(str(e))
        return 1

    print(format_component_tree(components))
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle the validate command."""
    try:
        components = load_components(args)
    except (InputError, ComponentImportError) as e:
        logger.error(str(e))
        return 1

    errors = validate_tree(components, strict_types=args.strict)
    if not errors:
        logger.info(f"Valid: {len(components)} top-level component(s)")
        return 0

    for error in errors:
        print(f"{error.error_type}: {error.node_id}: {error.message}")
    logger.error(f"Found {len(errors)} validation error(s)")
    return 1


def _export_options(args: argparse.Namespace) -> ExportOptions:
    """Build ExportOptions, leaving unset flags to their configured defaults.

    Template exports are named after the template unless --name is given.
    """
    name = args.name
    if name is None and args.template:
        name = pascal_case(get_template(args.template).name)
    values = {
        "format": args.format,
        "framework": args.framework,
        "styling": args.styling,
        "typescript": True if args.typescript else None,
        "include_imports": False if args.no_imports else None,
        "prettier": True if args.prettier else None,
        "component_name": name,
    }
    return ExportOptions(**{k: v for k, v in values.items() if v is not None})


def cmd_export(args: argparse.Namespace) -> int:
    """Handle the export command."""
    try:
        components = load_components(args)
        options = _export_options(args)
        output = OutputGenerator().generate(components, options)
    except (InputError, ComponentImportError, ExportError, ValidationError) as e:
        logger.error(f"Export failed: {e}")
        return 1

    if args.output:
        try:
            args.output.write_text(output.code, encoding="utf-8")
        except OSError as e:
            logger.error(f"Cannot write {args.output}: {e}")
            return 1
        logger.info(f"Exported {len(components)} component(s) to {args.output}")
    else:
        print(output.code, end="")
    return 0


# =============================================================================
# Parser
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="visual-builder",
        description="Build component trees and export them as framework code",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: BUILDER_LOG_LEVEL or INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # registry command
    registry_parser = subparsers.add_parser("registry", help="List component types")
    registry_parser.add_argument(
        "--category",
        "-c",
        type=str,
        default=None,
        help="Only list one palette category",
    )
    registry_parser.add_argument(
        "--json",
        action="store_true",
        help="Print full definitions as JSON",
    )
    registry_parser.set_defaults(func=cmd_registry)

    # frameworks command
    frameworks_parser = subparsers.add_parser("frameworks", help="List export frameworks")
    frameworks_parser.set_defaults(func=cmd_frameworks)

    # templates command
    templates_parser = subparsers.add_parser("templates", help="List layout templates")
    templates_parser.add_argument(
        "--category",
        "-c",
        type=str,
        default=None,
        help="Only list one template category",
    )
    templates_parser.add_argument(
        "--search",
        "-s",
        type=str,
        default=None,
        help="Match name, description or tags",
    )
    templates_parser.set_defaults(func=cmd_templates)

    # tree command
    tree_parser = subparsers.add_parser("tree", help="Print a forest as a text tree")
    _add_source_arguments(tree_parser)
    tree_parser.set_defaults(func=cmd_tree)

    # validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a JSON forest")
    validate_parser.add_argument(
        "--input",
        "-i",
        type=Path,
        required=True,
        help="JSON file holding a component forest",
    )
    validate_parser.add_argument(
        "--strict",
        action="store_true",
        help="Report unregistered component types",
    )
    validate_parser.set_defaults(func=cmd_validate)

    # export command
    export_parser = subparsers.add_parser("export", help="Export a forest")
    _add_source_arguments(export_parser)
    export_parser.add_argument(
        "--format",
        "-f",
        type=str,
        default=None,
        help="Output kind: code, factory or json (default: code)",
    )
    export_parser.add_argument(
        "--framework",
        type=str,
        default=None,
        help="Target framework (default: BUILDER_FRAMEWORK or react)",
    )
    export_parser.add_argument(
        "--styling",
        type=str,
        default=None,
        help="Styling system: css, scss, plain or tailwind (default: BUILDER_STYLING)",
    )
    export_parser.add_argument(
        "--typescript",
        action="store_true",
        help="Emit TypeScript",
    )
    export_parser.add_argument(
        "--no-imports",
        action="store_true",
        help="Omit framework import lines",
    )
    export_parser.add_argument(
        "--prettier",
        action="store_true",
        help="Normalise whitespace in the output",
    )
    export_parser.add_argument(
        "--name",
        "-n",
        type=str,
        default=None,
        help="Generated component name (default: GeneratedComponent)",
    )
    export_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )
    export_parser.set_defaults(func=cmd_export)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(get_log_level(args.log_level))
    return args.func(args)


__all__ = ["main", "build_parser", "load_components", "InputError"]
