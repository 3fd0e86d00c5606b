"""Command-line interface for Variable Formatter."""

import argparse
import sys

import argcomplete

from .case_utils import CONVENTION_ALIASES, CONVENTIONS
from .config import LANGUAGE_CONVENTIONS, ConfigError, load_config, resolve_convention
from .core import (
    INVALID_IDENTIFIER,
    NO_CANDIDATES,
    NO_INPUT,
    apply_edits,
    format_all_variables,
    format_selections,
    format_variable,
    preview_variable,
)
from .formatters import (
    format_conversions_table,
    format_edits_table,
    format_json_output,
    format_preview_table,
)
from .utils import debug_print, parse_range, sanitize_input, set_debug_enabled

EPILOG = """
Examples:
  varformat -c snake_case XMLHttpRequest          (xml_http_request)
  varformat -c PascalCase myVariable other_name   (several names at once)
  varformat -l python fetchUserData               (language default: snake_case)
  varformat --preview HTML5Parser                 (all conventions side by side)
  varformat -c camelCase -a -f app.js --dry-run   (show edits for the whole file)
  varformat -c camelCase -a -f app.js -i -y       (rewrite the file in place)
  varformat -c kebab -f style.css -s 10:24 -s 40:52
  cat names.txt | varformat -c SCREAMING_SNAKE_CASE

Conventions:
  camelCase, PascalCase, snake_case, kebab-case, SCREAMING_SNAKE_CASE
  (aliases: camel, pascal, snake, kebab, screaming, constant, upper)

Configuration (.varformat.yaml in the working directory or home directory):
  default_convention: snake_case
  languages:
    javascript: camelCase
    go: PascalCase

Autocomplete Setup:
  Bash:
    eval "$(register-python-argcomplete varformat)"
  Zsh:
    autoload -U bashcompinit && bashcompinit
    eval "$(register-python-argcomplete varformat)"
  Fish:
    register-python-argcomplete --shell fish varformat | source
"""


def convention_completer(prefix, parsed_args, **kwargs):
    """Autocomplete convention tags and aliases"""
    names = list(CONVENTIONS) + sorted(CONVENTION_ALIASES)
    return [name for name in names if name.startswith(prefix)]


def language_completer(prefix, parsed_args, **kwargs):
    """Autocomplete language ids with a built-in default convention"""
    return sorted(language for language in LANGUAGE_CONVENTIONS if language.startswith(prefix))


def selection_type(text):
    """argparse type for START:END selections"""
    try:
        return parse_range(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def create_parser():
    parser = argparse.ArgumentParser(
        prog="varformat",
        description="Convert variable names between naming conventions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )

    convention_arg = parser.add_argument(
        "-c", "--convention", help="Target naming convention (tag or alias)"
    )
    convention_arg.completer = convention_completer  # type: ignore[attr-defined]

    language_arg = parser.add_argument(
        "-l", "--language", help="Use the recommended convention for this language"
    )
    language_arg.completer = language_completer  # type: ignore[attr-defined]

    parser.add_argument("--config", help="Path to a YAML config file")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-p", "--preview", action="store_true", help="Show every convention for each NAME"
    )
    mode.add_argument(
        "-a", "--all", action="store_true", help="Format all variables in FILE (or stdin)"
    )
    mode.add_argument(
        "-s",
        "--select",
        action="append",
        type=selection_type,
        metavar="START:END",
        help="Format the given character range of FILE; repeat for multiple selections",
    )

    parser.add_argument("-f", "--file", help="Document to read, '-' for stdin")
    parser.add_argument(
        "-i", "--in-place", action="store_true", help="Write the formatted document back to FILE"
    )
    parser.add_argument(
        "-y", "--yes", action="store_true", help="Do not ask for confirmation with --all"
    )
    parser.add_argument(
        "--dry-run", action="store_true", help="Show the edits without applying them"
    )
    parser.add_argument(
        "-j", "--json", action="store_true", help="Output results in JSON format instead of text"
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug output")
    parser.add_argument("names", nargs="*", metavar="NAME", help="Variable names to convert")
    return parser


def prompt_confirmation(message: str) -> bool:
    """Ask the user a yes/no question on stdin."""
    while True:
        response = input(f"{message} (yes/no): ").lower().strip()
        if response in ["yes", "y"]:
            return True
        elif response in ["no", "n"]:
            return False
        else:
            print("Please answer 'yes' or 'no'.", file=sys.stderr)


def read_document(path):
    """Read the document text from a file, or stdin for None and '-'."""
    if not path or path == "-":
        debug_print("Reading document from stdin")  # pragma: no mutate
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def write_document(path, text):
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    debug_print(f"Wrote {len(text)} characters to {path}")  # pragma: no mutate


def read_names(names):
    """Names from the command line, or whitespace-separated names piped on stdin."""
    if names:
        return [sanitize_input(name) for name in names]
    if not sys.stdin.isatty():
        return sys.stdin.read().split()
    return []


def run_names(args, convention):
    """Convert each NAME, printing valid results and reporting invalid ones."""
    names = read_names(args.names)
    if not names:
        print("ERROR: Please provide a variable name to format", file=sys.stderr)
        return 1

    results = [format_variable(name, convention) for name in names]
    exit_code = 0
    for position, result in enumerate(results, start=1):
        if not result.ok:
            label = f"Name {position}: " if len(results) > 1 else ""
            print(f"ERROR: {label}{result.message}", file=sys.stderr)
            exit_code = 1

    if args.json:
        print(format_json_output(results))
    elif len(results) == 1:
        result = results[0]
        if result.ok:
            print(result.converted)
            if not result.changed:
                print(result.message, file=sys.stderr)
    else:
        print(format_conversions_table(results))
    return exit_code


def run_preview(args):
    names = read_names(args.names)
    if not names:
        print("ERROR: Please provide a variable name to preview", file=sys.stderr)
        return 1

    results = [preview_variable(name) for name in names]
    exit_code = 0
    tables = []
    for result in results:
        if not result.ok:
            print(f"ERROR: {result.message}", file=sys.stderr)
            exit_code = 1
            continue
        tables.append(f"Preview formatting for '{result.original}':\n{format_preview_table(result)}")

    if args.json:
        print(format_json_output(results))
    elif tables:
        print("\n\n".join(tables))
    return exit_code


def emit_document_result(args, document, result):
    """Print, preview or apply the edits of a document-level result."""
    if args.json:
        print(format_json_output(result))
    elif args.dry_run:
        print(format_edits_table(document, result))

    if args.dry_run:
        return 0

    new_text = apply_edits(document, result.edits)
    if args.in_place:
        if result.edits:
            write_document(args.file, new_text)
    elif not args.json:
        sys.stdout.write(new_text)

    print(result.message, file=sys.stderr)
    return 0


def run_format_all(args, convention):
    if not args.yes and not args.dry_run and (not args.file or args.file == "-"):
        print("ERROR: --yes is required when formatting all variables from stdin", file=sys.stderr)
        return 1

    document = read_document(args.file)
    result = format_all_variables(document, convention)

    if result.status == NO_CANDIDATES:
        print(result.message, file=sys.stderr)
        return 1

    if not args.yes and not args.dry_run:
        question = f"Found {result.candidates} variables. Convert all to {convention}?"
        if not prompt_confirmation(question):
            print("Operation cancelled.", file=sys.stderr)
            return 0

    return emit_document_result(args, document, result)


def run_selections(args, convention):
    document = read_document(args.file)
    result = format_selections(document, args.select, convention)

    if result.multiple and result.invalid_selections and result.status != INVALID_IDENTIFIER:
        print(
            f"WARNING: Invalid variable names in: {result.invalid_selection_labels()}",
            file=sys.stderr,
        )

    if result.status in (NO_INPUT, INVALID_IDENTIFIER):
        print(f"ERROR: {result.message}", file=sys.stderr)
        return 1

    return emit_document_result(args, document, result)


def main():
    parser = create_parser()
    argcomplete.autocomplete(parser)
    args = parser.parse_args()

    set_debug_enabled(args.debug)

    if args.in_place and (not args.file or args.file == "-"):
        parser.error("--in-place requires --file")
    if args.names and (args.all or args.select):
        parser.error("NAME arguments cannot be combined with --all or --select")

    try:
        config = load_config(args.config)
        convention = resolve_convention(args.convention, args.language, config)
    except (ConfigError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    debug_print(f"Target convention: {convention}")  # pragma: no mutate

    try:
        if args.preview:
            exit_code = run_preview(args)
        elif args.all:
            exit_code = run_format_all(args, convention)
        elif args.select:
            exit_code = run_selections(args, convention)
        else:
            exit_code = run_names(args, convention)
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(1)

    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
