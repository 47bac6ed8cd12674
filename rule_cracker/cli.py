#!/usr/bin/env python3
"""
Command-line interface for the Rule Cracker.
"""

import argparse
import os
import sys
from typing import List, Optional

from rule_cracker.core.cracker import HashCracker
from rule_cracker.core.filters import build_predicate, filter_words
from rule_cracker.core.variants import parse_substitutions, substitute_variants
from rule_cracker.utils.config import Config, verbosity_to_level
from rule_cracker.utils.logger import Logger
from rule_cracker.utils.exceptions import InputFileError, RuleCrackerError


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser"""
    # Options shared by every mode
    common = argparse.ArgumentParser(add_help=False)
    output_group = common.add_argument_group("Output Options")
    output_group.add_argument(
        "-v",
        "--verbosity",
        choices=["debug", "info", "warning", "error", "critical"],
        help="Logging verbosity level (default: info)",
    )
    output_group.add_argument("--log-file", help="Save log output to this file")
    output_group.add_argument(
        "--error-log", help="Append timestamped errors to this file (default: error.log)"
    )
    output_group.add_argument(
        "-q", "--quiet", action="store_true", help="Suppress standard output messages"
    )

    config_group = common.add_argument_group("Configuration")
    config_group.add_argument("--config", help="Path to configuration file")
    config_group.add_argument(
        "--save-config",
        action="store_true",
        help="Save current settings as default configuration",
    )

    parser = argparse.ArgumentParser(
        description="Rule-based password hash cracker",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    # Cracking mode
    crack_parser = subparsers.add_parser(
        "crack", parents=[common], help="Crack hashes using a rules file"
    )
    files_group = crack_parser.add_argument_group("Files")
    files_group.add_argument(
        "-i", "--input", help="File of identifier:digest lines (default: input.txt)"
    )
    files_group.add_argument(
        "-o", "--output", help="File that cracked pairs are appended to (default: output.txt)"
    )
    files_group.add_argument(
        "-r", "--rules", help="Rules file (default: rules.conf)"
    )
    crack_parser.add_argument(
        "-a", "--algorithm", help="Digest algorithm, e.g. sha256, SHA-256, md5 (default: sha256)"
    )
    crack_parser.add_argument(
        "--no-progress", action="store_true", help="Do not show a progress bar"
    )

    # Word list filtering
    filter_parser = subparsers.add_parser(
        "filter", parents=[common], help="Print the words of a word file that match filters"
    )
    filter_parser.add_argument("word_file", help="Word file to filter")
    filter_parser.add_argument(
        "--length", "--len", type=int, help="Keep only words of exactly this length"
    )
    filter_parser.add_argument(
        "--has", default="", help="Keep only words containing any of these characters"
    )

    # Substitution variants
    replace_parser = subparsers.add_parser(
        "replace",
        parents=[common],
        help="Print every substitution variant of each word in a word file",
    )
    replace_parser.add_argument("word_file", help="Word file to read")
    replace_parser.add_argument(
        "substitutions",
        nargs="+",
        help="Two-character substitutions, e.g. a@ o0 e3",
    )

    return parser


def setup_logger(args, config: Config) -> Logger:
    """Set up logging based on command-line arguments and config"""
    # Command-line args override config
    verbosity = args.verbosity or config.get("verbosity", "info")
    log_file = args.log_file or config.get("log_file")
    error_log = args.error_log or config.get("error_log")

    return Logger(
        name="rule_cracker",
        log_file=log_file,
        level=verbosity_to_level(verbosity),
        console=not args.quiet,
        error_file=error_log,
    )


def resolve_file(path: str, must_exist: bool) -> str:
    """Make sure a file path is usable

    Args:
        path: The file path to check
        must_exist: Whether the file needs to exist already

    Returns:
        The path

    Raises:
        InputFileError: If the file is missing or is a directory
    """
    if must_exist and not os.path.exists(path):
        raise InputFileError(f"Cannot find file: {path}")
    if os.path.isdir(path):
        raise InputFileError(f"File cannot be directory: {path}")
    return path


def print_system_info(logger, algorithm: str) -> None:
    """Log system information useful for debugging"""
    import platform
    import tqdm

    logger.debug("=== System Information ===")
    logger.debug(f"Python version: {platform.python_version()}")
    logger.debug(f"Platform: {platform.platform()}")
    logger.debug(f"tqdm version: {tqdm.__version__}")
    logger.debug(f"Digest algorithm: {algorithm}")
    logger.debug("=========================")


def save_config_from_args(args, config: Config) -> None:
    """Save configuration from command-line arguments"""
    for key in ("input", "output", "rules", "algorithm", "verbosity", "log_file", "error_log"):
        value = getattr(args, key, None)
        if value:
            config.set(key, value)
    if getattr(args, "no_progress", False):
        config.set("progress", False)

    config.save()


def run_crack(args, config: Config, logger) -> int:
    """Run every rule against the target file"""
    input_path = resolve_file(args.input or config.get("input"), True)
    output_path = resolve_file(args.output or config.get("output"), False)
    rules_path = resolve_file(args.rules or config.get("rules"), True)
    algorithm = args.algorithm or config.get("algorithm", "sha256")

    print_system_info(logger, algorithm)

    cracker = HashCracker.from_file(
        input_path,
        algorithm=algorithm,
        output_path=output_path,
        logger=logger,
        show_progress=config.get("progress", True) and not args.no_progress and not args.quiet,
        unsolved_preview=config.get("unsolved_preview", 6),
    )
    result = cracker.crack_with_rules_file(rules_path)

    if result.all_cracked:
        return 0

    for line in result.summary_lines():
        print(line)
    return 1


def run_filter(args) -> int:
    """Print matching words of a word file"""
    word_file = resolve_file(args.word_file, True)
    predicate = build_predicate(args.length, args.has)
    try:
        with open(word_file, 'r', encoding='utf-8', errors='surrogateescape') as f:
            for word in filter_words(f, predicate):
                print(word)
    except OSError as e:
        raise InputFileError(f"Failed to read the input file: {e}")
    return 0


def run_replace(args) -> int:
    """Print every substitution variant of every word in a word file"""
    replacements = parse_substitutions(args.substitutions)
    word_file = resolve_file(args.word_file, True)
    try:
        with open(word_file, 'r', encoding='utf-8', errors='surrogateescape') as f:
            for line in f:
                for variant in substitute_variants(line.strip(), replacements):
                    print(variant)
    except OSError as e:
        raise InputFileError(f"Couldn't read or write during substitution: {e}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the rule cracker CLI

    Returns:
        Exit code (0 for success, non-zero for error or uncracked targets)
    """
    # Parse arguments
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = Config(args.config)
    except RuleCrackerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    error_log = args.error_log or config.get("error_log")
    if error_log and os.path.isdir(error_log):
        print(f"File cannot be directory: {error_log}", file=sys.stderr)
        return 1

    # Set up logging
    logger = setup_logger(args, config).get_logger()

    try:
        # Save configuration if requested
        if args.save_config:
            save_config_from_args(args, config)
            logger.info(f"Configuration saved to {config.config_path}")

        if args.command == "filter":
            return run_filter(args)
        if args.command == "replace":
            return run_replace(args)
        return run_crack(args, config, logger)

    except RuleCrackerError as e:
        logger.error(f"Error: {str(e)}")
        return 1
    except KeyboardInterrupt:
        logger.info("\nProcess interrupted by user.")
        return 130
    except Exception as e:
        logger.exception(f"Unexpected error: {str(e)}")
        return 1


def display_examples():
    """Display usage examples"""
    examples = [
        "Basic usage (reads input.txt and rules.conf, appends to output.txt):",
        "  rule-cracker crack",
        "",
        "Choose files and algorithm:",
        "  rule-cracker crack -i hashes.txt -r my.rules -o cracked.txt -a md5",
        "",
        "Example rules file:",
        '  read "words.txt" | add capitalized | add 2 digits',
        '  permute "abc123"',
        "  1 to 6 digits",
        "",
        "Keep 6-letter words containing a digit or symbol:",
        "  rule-cracker filter words.txt --length 6 --has 0123456789!@",
        "",
        "Print every substitution variant of each word:",
        "  rule-cracker replace words.txt a@ o0 e3",
        "",
        "Save configuration for future use:",
        "  rule-cracker crack -a sha1 --no-progress --save-config",
        "",
        "For more options:",
        "  rule-cracker -h",
    ]

    print("\n".join(examples))


if __name__ == "__main__":
    if len(sys.argv) == 1:
        display_examples()
        sys.exit(1)

    sys.exit(main())
