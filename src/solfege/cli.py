"""
CLI tool for note/syllable transcoding.

Usage:
    # Notes to syllables (CDEFGAB -> UtReMiFaSolLaSi)
    python -m src.solfege.cli 804619 notes.txt

    # Syllables to notes
    python -m src.solfege.cli 1128809 syllables.txt

    # Symbolic modes, stdin input, truncation instead of overflow errors
    python -m src.solfege.cli to-syllables - --overflow truncate < notes.txt
"""

import argparse
import logging
import os
import sys
from typing import Any, BinaryIO, Dict, List, Optional

import yaml

from . import __version__
from .config import (
    LimitsConfig,
    ModeConfig,
    OVERFLOW_POLICIES,
    TranscoderConfig,
    load_config,
)
from .errors import (
    FileOpenError,
    InvalidCommandError,
    NoNotesError,
    NoSyllablesError,
    ResultCode,
    TooManyNotesError,
    TooManySyllablesError,
    TranscoderError,
)
from .symbols import Direction
from .translator import Translator


INT_MAX = 2 ** 31 - 1

MODE_ALIASES = {direction.value: direction for direction in Direction}

STDIN_PATH = '-'


def setup_logging(verbose: bool = False, level: str = "WARNING",
                  fmt: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s') -> None:
    """Setup logging configuration."""
    log_level = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=log_level,
        format=fmt,
        stream=sys.stderr
    )


def resolve_mode(raw: str, modes: ModeConfig) -> Direction:
    """
    Map a mode argument to a translation direction.

    Args:
        raw: Numeric mode code or a symbolic alias ('to-syllables', 'to-notes')
        modes: Recognized mode codes

    Returns:
        Selected direction

    Raises:
        InvalidCommandError: If the argument selects no direction
    """
    text = raw.strip()
    if text.lower() in MODE_ALIASES:
        return MODE_ALIASES[text.lower()]

    # Plain ASCII decimal only; int() would also take '804_619' or full-width digits
    if not (text.isascii() and text.isdigit()):
        raise InvalidCommandError(f"Invalid mode: {raw!r}")

    code = int(text)
    if code > INT_MAX:
        raise InvalidCommandError(f"Mode out of range: {code}")
    if code == modes.to_syllables:
        return Direction.TO_SYLLABLES
    if code == modes.to_notes:
        return Direction.TO_NOTES
    raise InvalidCommandError(f"Unknown mode: {code}")


def read_input(path: str, direction: Direction, limits: LimitsConfig) -> bytes:
    """
    Read the raw input for a translation, enforcing the size bounds.

    The size is checked before the content is read. ``-`` reads stdin.

    Raises:
        FileOpenError: If the path cannot be opened
        NoNotesError / NoSyllablesError: If the input is empty
        TooManyNotesError / TooManySyllablesError: If the input is too large
    """
    if direction is Direction.TO_SYLLABLES:
        empty_error, too_many_error, kind = NoNotesError, TooManyNotesError, 'notes'
    else:
        empty_error, too_many_error, kind = NoSyllablesError, TooManySyllablesError, 'syllables'

    if path == STDIN_PATH:
        data = sys.stdin.buffer.read(limits.max_input_bytes + 1)
        size = len(data)
    else:
        try:
            f = open(path, 'rb')
        except OSError as e:
            raise FileOpenError(f"Error opening file {path}: {e.strerror}") from e
        with f:
            try:
                if f.seekable():
                    f.seek(0, os.SEEK_END)
                    size = f.tell()
                    f.seek(0, os.SEEK_SET)
                    data = f.read(size) if 0 < size <= limits.max_input_bytes else b''
                else:
                    # Pipes and FIFOs have no size; read one byte past the limit
                    data = f.read(limits.max_input_bytes + 1)
                    size = len(data)
            except OSError as e:
                raise FileOpenError(f"Error reading file {path}: {e}") from e

    if size == 0:
        raise empty_error(f"No {kind} in {path}")
    if size > limits.max_input_bytes:
        raise too_many_error(
            f"Too many {kind} in {path}: more than {limits.max_input_bytes} bytes"
        )
    return data


def run(mode: str, input_path: str, config: TranscoderConfig,
        stream: Optional[BinaryIO] = None) -> ResultCode:
    """
    Translate one input and write the result.

    Args:
        mode: Mode argument as given on the command line
        input_path: Input file path, or '-' for stdin
        config: Transcoder configuration
        stream: Binary output stream (default: stdout)

    Returns:
        ResultCode of the run
    """
    logger = logging.getLogger(__name__)
    stream = stream if stream is not None else sys.stdout.buffer

    try:
        direction = resolve_mode(mode, config.modes)
        data = read_input(input_path, direction, config.limits)
        logger.info(f"Translating {len(data)} bytes from {input_path} ({direction.value})")

        translator = Translator(config.limits, config.output.overflow_policy)
        result = translator.translate(direction, data)
    except TranscoderError as e:
        logger.error(f"{e.code.name}: {e}")
        return e.code

    stream.write(config.output.prefix.encode('utf-8') + result.output)
    stream.flush()

    logger.info(f"Wrote {result.bytes_written} bytes")
    if result.truncated:
        logger.warning(
            f"Output truncated at {result.bytes_written} bytes after "
            f"{result.bytes_consumed} of {len(data)} input bytes"
        )
        return ResultCode.TRANSLATION_OVERFLOW
    return ResultCode.SUCCESS


def build_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Collect config overrides from command-line flags."""
    overrides: Dict[str, Any] = {}

    limits = {}
    if args.max_input_bytes is not None:
        limits['max_input_bytes'] = args.max_input_bytes
    if args.max_output_bytes is not None:
        limits['max_output_bytes'] = args.max_output_bytes
    if limits:
        overrides['limits'] = limits

    output = {}
    if args.overflow is not None:
        output['overflow_policy'] = args.overflow
    if args.prefix is not None:
        output['prefix'] = args.prefix
    if output:
        overrides['output'] = output

    return overrides


def create_arg_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog='solfege',
        description="Translate between note names (CDEFGAB) and solfège syllables (Ut Re Mi Fa Sol La Si)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modes:
  804619   or to-syllables   notes -> syllables
  1128809  or to-notes       syllables -> notes
        """
    )
    parser.add_argument('mode', nargs='?',
                        help='Translation mode code or alias')
    parser.add_argument('input', nargs='?',
                        help="Input file path ('-' for stdin)")
    parser.add_argument('--config', type=str,
                        help='Path to YAML configuration file')
    parser.add_argument('--max-input-bytes', type=int,
                        help='Maximum input size in bytes (default: 2048)')
    parser.add_argument('--max-output-bytes', type=int,
                        help='Syllable output capacity in bytes (default: 4096)')
    parser.add_argument('--overflow', choices=OVERFLOW_POLICIES,
                        help='What to do when output exceeds capacity (default: error)')
    parser.add_argument('--prefix', type=str,
                        help="Text written before the output (default: one space)")
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_arg_parser()
    args = parser.parse_args(argv)

    if args.mode is None or args.input is None:
        parser.print_usage(sys.stderr)
        return ResultCode.INVALID_COMMAND.exit_status

    try:
        config = load_config(args.config, build_overrides(args))
    except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return ResultCode.INVALID_COMMAND.exit_status

    setup_logging(args.verbose, config.logging.level, config.logging.format)

    return run(args.mode, args.input, config).exit_status


if __name__ == '__main__':
    sys.exit(main())
