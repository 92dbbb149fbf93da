"""
Command-line interface for validating text and whole forms.

Usage:
    python -m formcheck.cli.validate_cli check --recipe <name> <text>
    python -m formcheck.cli.validate_cli form --config <fields.yaml> --input <values.json>
    python -m formcheck.cli.validate_cli recipes
"""

import argparse
import json
import sys
from pathlib import Path

from formcheck.config import Settings
from formcheck.core.rules import DirectorRegistry, RecipeConfigLoader, validate_text
from formcheck.observability.logger import configure_logging, get_logger
from formcheck.observability.metrics import start_metrics_server
from formcheck.pipeline import DefaultFormValidation

logger = get_logger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def build_registry(settings: Settings, config_path: str | None) -> DirectorRegistry:
    """Registry from settings, plus recipes from an explicit config file."""
    registry = settings.build_registry()
    if config_path:
        loader = RecipeConfigLoader(config_path)
        registry.register_recipes(loader.load_recipes())
    return registry


def check_command(args, settings: Settings) -> int:
    """
    Validate a single text with a named recipe.

    Args:
        args: Command-line arguments
        settings: Runtime settings

    Returns:
        Exit code
    """
    registry = build_registry(settings, args.config)
    is_valid, errors = validate_text(args.text, registry.get(args.recipe))

    print(json.dumps({
        "recipe": args.recipe,
        "is_valid": is_valid,
        "errors": [error.value for error in errors],
    }))
    return EXIT_VALID if is_valid else EXIT_INVALID


def form_command(args, settings: Settings) -> int:
    """
    Validate a whole form given as a JSON object of field id to text.

    Args:
        args: Command-line arguments
        settings: Runtime settings

    Returns:
        Exit code
    """
    input_path = Path(args.input)
    if not input_path.exists():
        logger.error(f"Input file not found: {args.input}")
        return EXIT_ERROR

    with open(input_path) as f:
        values = json.load(f)

    if not isinstance(values, dict) or not all(isinstance(v, str) for v in values.values()):
        logger.error("Input file must contain a JSON object mapping field ids to strings")
        return EXIT_ERROR

    registry = build_registry(settings, args.config)
    config_path = args.config or settings.fields_path
    if config_path:
        policy = RecipeConfigLoader(config_path).load_field_policy()
    else:
        policy = settings.build_field_policy()
    policy.check_recipes(registry)

    pipeline = DefaultFormValidation(policy.collect(values, registry, strict=args.strict))
    result = pipeline.process()

    print(result.model_dump_json(indent=2 if args.pretty else None))
    return EXIT_VALID if result.is_valid else EXIT_INVALID


def recipes_command(args, settings: Settings) -> int:
    """List registered recipe names."""
    registry = build_registry(settings, args.config)
    for name in registry.names():
        print(name)
    return EXIT_VALID


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Rule-based form input validation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate a password
  python -m formcheck.cli.validate_cli check --recipe password 'Abc12345'

  # Validate a form against a field policy
  python -m formcheck.cli.validate_cli form --config config/fields.yaml --input form.json

  # List available recipes, including ones from a config file
  python -m formcheck.cli.validate_cli recipes --config config/fields.yaml
        """
    )
    parser.add_argument(
        "--env-file",
        help="Path to a .env file to load before reading settings"
    )
    parser.add_argument(
        "--metrics",
        action="store_true",
        help="Expose Prometheus metrics on METRICS_PORT while running"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser("check", help="Validate one text with a recipe")
    check_parser.add_argument("--recipe", required=True, help="Recipe name (e.g. username, password)")
    check_parser.add_argument("--config", help="YAML file with additional recipes")
    check_parser.add_argument("text", help="Text to validate")

    form_parser = subparsers.add_parser("form", help="Validate a form from a JSON file")
    form_parser.add_argument("--config", help="YAML file with recipes and field policy")
    form_parser.add_argument("--input", required=True, help="JSON file mapping field ids to values")
    form_parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject fields not listed in the field policy"
    )
    form_parser.add_argument("--pretty", action="store_true", help="Indent JSON output")

    recipes_parser = subparsers.add_parser("recipes", help="List registered recipes")
    recipes_parser.add_argument("--config", help="YAML file with additional recipes")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_ERROR

    commands = {
        "check": check_command,
        "form": form_command,
        "recipes": recipes_command,
    }

    try:
        settings = Settings.from_env(args.env_file)
        configure_logging(settings.log_level, settings.log_format)
        if args.metrics:
            start_metrics_server(settings.metrics_port)
        return commands[args.command](args, settings)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Error: {e}")
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
