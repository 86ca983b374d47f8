"""Main CLI entry point for the multi-framework component transpiler"""

import sys
import argparse
import traceback
from pathlib import Path
from typing import List, Optional

from multitranspile.analyzers.global_extractor import extract_global_code
from multitranspile.core.config import DEFAULT_OUTPUT_DIR, TranspilerConfig
from multitranspile.core.errors import InputNotFoundError, TranspileError
from multitranspile.core.extraction_logger import ExtractionLogger
from multitranspile.frontends import get_frontend, parse_source
from multitranspile.generators.component_emitter import ComponentEmitter


def transpile_file(
    input_file: Path,
    config: Optional[TranspilerConfig] = None,
    logger: Optional[ExtractionLogger] = None,
) -> str:
    """Extract the global code block of one input file

    Args:
        input_file: Path to a .js/.jsx/.ts/.tsx/.vue/.svelte file
        config: Run configuration (defaults if omitted)
        logger: Optional extraction logger

    Returns:
        Global code block

    Raises:
        InputNotFoundError: If input_file doesn't exist
        UnsupportedFormatError: If the extension has no front-end
        ScriptParseError: If the script cannot be parsed
    """
    config = config or TranspilerConfig()
    input_file = Path(input_file)

    if not input_file.is_file():
        raise InputNotFoundError(input_file)

    # Reject unknown formats before reading anything
    extension = input_file.suffix
    get_frontend(extension)

    source = input_file.read_text(encoding="utf-8")
    parsed = parse_source(source, extension)
    if parsed is None and logger is not None:
        logger.log_warning(f"No script block found in {input_file}")

    return extract_global_code(parsed, config.global_identifiers, logger)


def transpile(
    input_file: Path,
    config: Optional[TranspilerConfig] = None,
    logger: Optional[ExtractionLogger] = None,
) -> List[Path]:
    """Transpile one input file into every output variant

    Nothing is written unless extraction succeeds.

    Args:
        input_file: Input source file
        config: Run configuration (output directory, global identifiers)
        logger: Optional extraction logger

    Returns:
        Paths of the generated files
    """
    config = config or TranspilerConfig()
    global_code = transpile_file(input_file, config, logger)
    emitter = ComponentEmitter(config.output_dir)
    return emitter.emit(global_code)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='transpile',
        description='Extract browser-global code and re-emit it as components '
                    'for React, Vue, Svelte, Angular and plain JS/TS',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  transpile src/widget.js
  transpile src/Widget.vue out/
  transpile app.svelte --global navigator --global sessionStorage
        """
    )

    parser.add_argument('input', type=Path, help='Input .js/.jsx/.ts/.tsx/.vue/.svelte file')
    parser.add_argument(
        'output_dir', nargs='?', type=Path, default=DEFAULT_OUTPUT_DIR,
        help=f'Output directory (default: {DEFAULT_OUTPUT_DIR})'
    )
    parser.add_argument(
        '--global', dest='globals', action='append', metavar='NAME', default=[],
        help='Treat NAME as a browser global as well (repeatable)'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Print the extraction summary'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point"""
    args = build_arg_parser().parse_args(argv)
    config = TranspilerConfig.from_args(args)
    logger = ExtractionLogger()

    try:
        written = transpile(args.input, config, logger)
    except TranspileError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except UnicodeDecodeError as e:
        print(f"Error: {args.input} is not valid UTF-8 ({e.reason} at byte {e.start})", file=sys.stderr)
        sys.exit(1)
    except Exception:
        print(f"Error transpiling {args.input}:", file=sys.stderr)
        traceback.print_exc()
        sys.exit(1)

    if config.verbose:
        print(logger.print_summary())
        print()

    for path in written:
        print(f"Generated: {path}")
    print(f"\nTranspilation completed. Files generated in: {config.output_dir}")


if __name__ == "__main__":
    main()
