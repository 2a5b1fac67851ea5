"""
CLI integration for code generation functionality.

Provides the ``generate`` subcommand of the command-line interface.
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.syntax import Syntax
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from ..logging_config import get_logger
from ..utils import JSONLoaderError, load_json, load_json_from_stream
from .core.config import ConfigError, GeneratorConfig, load_config
from .core.generator import GenerationResult, GeneratorError, generate_code
from .core.schema import SchemaError, load_entities
from .registry import (
    RegistryError,
    get_generator,
    get_language_info,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
    resolve_language,
)

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


def create_generate_subparser(subparsers) -> argparse.ArgumentParser:
    """
    Create the ``generate`` subcommand parser.

    For use with: entity-codegen generate [options] FILE

    Args:
        subparsers: Subparser group from main parser

    Returns:
        Configured subparser for the generate command
    """
    parser = subparsers.add_parser(
        "generate",
        help="Generate entity interfaces from an entity document",
        description="Generate Java interfaces or Scala traits for tables and UDTs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  entity-codegen generate --language java --package-name com.example.db schema.json
  entity-codegen generate -l scala --output src/main/scala --stdin < schema.json
  entity-codegen generate --list-languages
  entity-codegen generate --language-info java
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="Entity document (JSON)")
    input_group.add_argument("--url", help="URL to fetch the entity document from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the entity document from standard input"
    )

    # Core generation options
    parser.add_argument(
        "--language", "-l", default="java", help="Target language (default: java)"
    )

    parser.add_argument(
        "--output", "-o", metavar="DIR", help="Output directory (default: print to stdout)"
    )

    parser.add_argument("--config", help="Configuration file path (JSON)")

    parser.add_argument("--package-name", "--package", help="Target package name")

    # Emission options
    emission_group = parser.add_argument_group("emission options")
    emission_group.add_argument(
        "--immutable-pojos",
        action="store_true",
        help="Emit getters only, without setters or copy methods",
    )
    emission_group.add_argument(
        "--fluent-setters",
        action="store_true",
        help="Setters return the interface instead of void",
    )
    emission_group.add_argument(
        "--jpa", action="store_true", help="Add JPA mapping annotations"
    )
    emission_group.add_argument(
        "--validation", action="store_true", help="Add Bean Validation annotations"
    )
    emission_group.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't add comments to generated code",
    )
    emission_group.add_argument(
        "--strict-types",
        action="store_true",
        help="Fail on SQL types without a JVM mapping",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show generation result metadata",
    )

    # Informational commands
    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported languages and exit",
    )
    info_group.add_argument(
        "--language-info",
        metavar="LANGUAGE",
        help="Show detailed info about a language and exit",
    )

    parser.set_defaults(func=handle_generate_command)
    return parser


def handle_generate_command(args: argparse.Namespace) -> int:
    """
    Handle the generate subcommand.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        # Handle info commands
        if args.list_languages:
            return _list_languages()

        if args.language_info:
            return _show_language_info(args.language_info)

        # Require input
        if not (args.file or args.url or args.stdin):
            console.print("[red]✗[/red] Input source required (file, --url, or --stdin)")
            return 1

        # Validate language
        if not _validate_language(args.language):
            return 1

        document = _get_input_document(args)
        config = _build_config(args)

        return _generate_and_output(document, args.language, config, args)

    except CLIError as e:
        logger.debug("generate failed: %s", e)
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def _list_languages() -> int:
    """List supported languages with details."""
    language_info = list_all_language_info()

    if not language_info:
        console.print("[yellow]⚠️ No code generators available[/yellow]")
        return 0

    table = Table(title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan")

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Syntax", style="magenta")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(
            f"🔧 {lang_name}",
            info["file_extension"],
            info["surface_syntax"],
            info["class"],
            aliases,
        )

    console.print()
    console.print(table)
    console.print()

    console.print(
        Panel(
            "[bold]Usage:[/bold] entity-codegen generate [dim]schema.json[/dim] --language [cyan]LANGUAGE[/cyan]\n"
            "[bold]Info:[/bold] entity-codegen generate --language-info [cyan]LANGUAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )

    return 0


def _show_language_info(language: str) -> int:
    """Show detailed information about a specific language."""
    if not _validate_language(language, silent=True):
        console.print(f"[red]✗ Language '{language}' is not supported[/red]")
        console.print("[dim]Use --list-languages to see available options[/dim]")
        return 1

    try:
        info = get_language_info(language)
        generator = get_generator(language)
    except RegistryError as e:
        console.print(f"[red]✗ Error getting language info:[/red] {e}")
        return 1

    info_text = f"""[bold]Language:[/bold] {info['name']}
[bold]File Extension:[/bold] {info['file_extension']}
[bold]Surface Syntax:[/bold] {info['surface_syntax']}
[bold]Generator Class:[/bold] {info['class']}
[bold]Module:[/bold] {info['module']}"""

    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    console.print()
    console.print(
        Panel(
            info_text,
            title=f"🔧 {info['name'].title()} Generator",
            border_style="green",
        )
    )

    config_table = Table(
        title="⚙️  Default Configuration",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )

    config_table.add_column("Setting", style="bold")
    config_table.add_column("Value", style="green")

    config = generator.config
    config_table.add_row("Package Name", str(config.package_name))
    config_table.add_row("Indent Size", str(config.indent_size))
    config_table.add_row("Interface Prefix", str(config.interface_prefix))
    config_table.add_row("Immutable POJOs", str(config.immutable_pojos))
    config_table.add_row("Fluent Setters", str(config.fluent_setters))
    config_table.add_row("Add Comments", str(config.add_comments))

    console.print()
    console.print(config_table)

    examples_text = f"""Generate interfaces:
[cyan]entity-codegen generate --language {language} schema.json[/cyan]

Write one file per entity:
[cyan]entity-codegen generate -l {language} -o generated schema.json[/cyan]

Custom package name:
[cyan]entity-codegen generate -l {language} --package com.example.db schema.json[/cyan]"""

    console.print()
    console.print(Panel(examples_text, title="💡 Usage Examples", border_style="blue"))

    return 0


def _validate_language(language: str, silent: bool = False) -> bool:
    """Validate that a language (or alias) is supported."""
    if not is_language_supported(language):
        if not silent:
            supported = list_supported_languages()
            console.print(f"[red]✗ Unsupported language '{language}'[/red]")
            console.print(f"[dim]Supported languages: {', '.join(supported)}[/dim]")
        return False
    return True


def _get_input_document(args: argparse.Namespace) -> Any:
    """Load the entity document from the selected input source."""
    try:
        if args.file:
            return load_json(file_path=args.file)[1]
        elif args.url:
            return load_json(url=args.url)[1]
        elif args.stdin:
            return load_json_from_stream(sys.stdin)[1]
        else:
            raise CLIError("No input source specified")
    except (JSONLoaderError, FileNotFoundError) as e:
        raise CLIError(f"Failed to load input: {e}") from e


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from the config file and CLI arguments."""
    config_dict: Dict[str, Any] = {}

    # Override with CLI arguments
    if args.package_name:
        config_dict["package_name"] = args.package_name
    if args.output:
        config_dict["output_dir"] = args.output
    if args.immutable_pojos:
        config_dict["immutable_pojos"] = True
    if args.fluent_setters:
        config_dict["fluent_setters"] = True
    if args.jpa:
        config_dict["generate_jpa_annotations"] = True
    if args.validation:
        config_dict["generate_validation_annotations"] = True
    if args.no_comments:
        config_dict["add_comments"] = False
    if args.strict_types:
        config_dict["strict_types"] = True

    language = resolve_language(args.language)
    try:
        return load_config(language, custom_config=config_dict, config_file=args.config)
    except (ConfigError, TypeError) as e:
        raise CLIError(f"Configuration error: {e}") from e


def _generate_and_output(
    document: Any, language: str, config: GeneratorConfig, args: argparse.Namespace
) -> int:
    """Generate code and handle output with rich formatting."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:

        load_task = progress.add_task("[cyan]Reading entity definitions...", total=None)
        try:
            entities = load_entities(document)
        except SchemaError as e:
            raise CLIError(f"Invalid entity document: {e}") from e
        progress.remove_task(load_task)

        gen_task = progress.add_task(f"[green]Generating {language} code...", total=None)
        try:
            generator = get_generator(language, config)
        except RegistryError as e:
            raise CLIError(str(e)) from e
        result = generate_code(generator, entities)
        progress.remove_task(gen_task)

    if not result.success:
        console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        if result.exception:
            console.print(f"[dim]Details: {result.exception}[/dim]")
        return 1

    if config.output_dir:
        try:
            written = write_files(result, config.output_dir)
        except GeneratorError as e:
            console.print(f"[red]✗[/red] {e}")
            return 1
        console.print(
            f"[green]✓[/green] Generated {len(written)} {language} file(s) in "
            f"[cyan]{config.output_dir}[/cyan]"
        )
    else:
        _print_sources(result, generator.language_name)

    if args.verbose and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )

        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")

        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))

        console.print()
        console.print(metadata_table)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")
        console.print()

    return 0


def _print_sources(result: GenerationResult, lexer: str):
    """Print every generated file with syntax highlighting."""
    border = "═" * 30
    for path, code in result.files.items():
        console.print(f"[green]{border} 📄 {path} {border}[/green]\n")
        console.print(Syntax(code, lexer, theme="monokai"))
        console.print()


def write_files(result: GenerationResult, output_dir: str) -> Dict[str, Path]:
    """
    Write generated files below an output directory.

    Args:
        result: Successful generation result
        output_dir: Root directory, package directories are created below it

    Returns:
        Mapping of relative path to written file

    Raises:
        GeneratorError: If a file cannot be written
    """
    root = Path(output_dir)
    written: Dict[str, Path] = {}

    for relative_path, code in result.files.items():
        target = root / relative_path
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(code, encoding="utf-8")
        except OSError as e:
            raise GeneratorError(f"Failed to write {target}: {e}") from e
        logger.debug("Wrote %s", target)
        written[relative_path] = target

    return written


def validate_cli_config(args: argparse.Namespace) -> Optional[GeneratorConfig]:
    """
    Validate CLI configuration for development/testing.

    Args:
        args: Parsed CLI arguments

    Returns:
        The configuration the arguments produce, or None if they are invalid
    """
    if not _validate_language(args.language, silent=True):
        return None

    try:
        return _build_config(args)
    except CLIError:
        return None
