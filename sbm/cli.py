"""
Command-line interface for the SBM toolkit.

This module provides the CLI for normalizing SBM bookmark files into
canonical form, checking whether a file is already canonical, and
exporting a parsed document as JSON.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from sbm import __version__
from sbm.config.pydantic_config import ConfigurationManager, SBMConfig
from sbm.core.exporters import ExportError, JSONExporter, SBMExporter, get_exporter
from sbm.core.exporters.base import DocumentExporter
from sbm.core.sbm_encoder import EncoderOptions, is_canonical
from sbm.core.sbm_parser import decode_text, parse
from sbm.utils.error_handler import SBMError, SBMFileError, ValidationError
from sbm.utils.logging_setup import setup_logging
from sbm.utils.validation import (
    validate_config_file,
    validate_conflicting_arguments,
    validate_input_file,
    validate_output_file,
)


class CLIInterface:
    """Command line interface for SBM files."""

    def __init__(self):
        self.parser = self._create_parser()
        self.logger = logging.getLogger(__name__)

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser."""
        parser = argparse.ArgumentParser(
            prog="sbm",
            description="Parse SBM bookmark files and write them in canonical form",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  sbm --input bookmarks.sbm
  sbm --input bookmarks.sbm --output bookmarks.sbm
  sbm --input - < bookmarks.sbm
  sbm --input bookmarks.sbm --check
  sbm --input bookmarks.sbm --format json --output bookmarks.json
  sbm --input bookmarks.sbm --emit-implicit-header --compact

Configuration:
  Settings can be provided via sbm_config.toml or sbm_config.json in the
  current directory, or with --config. Example (sbm_config.toml):

  [encoder]
  emit_implicit_header = false
  compact = false

  [output]
  format = "sbm"
  json_indent = 2

  [logging]
  level = "WARNING"
            """,
        )

        parser.add_argument(
            "--version", "-V", action="version", version=f"%(prog)s {__version__}"
        )
        parser.add_argument(
            "--create-config",
            choices=["toml", "json"],
            help="Write a sample configuration file (sbm_config.toml or "
            "sbm_config.json) to the current directory and exit",
        )

        # Input/output arguments
        parser.add_argument(
            "--input",
            "-i",
            help="Input SBM file ('-' reads standard input)",
        )
        parser.add_argument(
            "--output",
            "-o",
            help="Output file (default: standard output)",
        )
        parser.add_argument(
            "--format",
            "-f",
            choices=["sbm", "json"],
            help="Output format (default: sbm, or the configured format)",
        )
        parser.add_argument(
            "--check",
            action="store_true",
            help="Exit with status 1 if the input is not already in canonical "
            "form; writes nothing",
        )

        # Encoder options
        parser.add_argument(
            "--emit-implicit-header",
            action="store_true",
            help="Write a bare '#' header above bookmarks that precede "
            "the first category",
        )
        parser.add_argument(
            "--compact",
            action="store_true",
            help="Write '|' separators without surrounding spaces",
        )

        # Configuration and logging
        parser.add_argument(
            "--config",
            "-c",
            help="Custom configuration file path (TOML or JSON format)",
        )
        parser.add_argument(
            "--log-file",
            help="Also write log output to this file",
        )
        parser.add_argument(
            "--verbose",
            "-v",
            action="store_true",
            help="Enable debug logging on standard error",
        )

        return parser

    def parse_args(self, args=None) -> argparse.Namespace:
        """Parse command line arguments."""
        return self.parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> Dict[str, Any]:
        """
        Validate all arguments and return processed values.

        Args:
            args: Parsed arguments from argparse

        Returns:
            Dictionary of validated and processed arguments

        Raises:
            ValidationError: If any validation fails
        """
        input_path = validate_input_file(args.input)
        validate_conflicting_arguments(args.check, args.output)
        output_path = validate_output_file(args.output)
        config_path = validate_config_file(args.config)

        return {
            "input_path": input_path,
            "output_path": output_path,
            "config_path": config_path,
            "format": args.format,
            "check": args.check,
            "emit_implicit_header": args.emit_implicit_header,
            "compact": args.compact,
            "log_file": args.log_file,
            "verbose": args.verbose,
        }

    def process_arguments(self, validated_args: Dict[str, Any]) -> SBMConfig:
        """
        Load configuration, apply argument overrides and set up logging.

        Args:
            validated_args: Dictionary of validated arguments

        Returns:
            Effective configuration
        """
        manager = ConfigurationManager(validated_args["config_path"])
        manager.update_from_cli_args(validated_args)
        config = manager.config

        setup_logging(config)

        return config

    def _read_input(self, input_path: Optional[Path]) -> str:
        """Read and decode the input document."""
        if input_path is None:
            self.logger.debug("Reading SBM document from standard input")
            return decode_text(sys.stdin.buffer.read())

        try:
            data = input_path.read_bytes()
        except OSError as e:
            raise SBMFileError(f"Error reading file: {str(e)}") from e
        return decode_text(data)

    def _build_exporter(self, config: SBMConfig) -> DocumentExporter:
        """Create the exporter for the configured output format."""
        exporter_class = get_exporter(config.output.format)

        if exporter_class is JSONExporter:
            return JSONExporter(
                indent=config.output.json_indent,
                ensure_ascii=config.output.ensure_ascii,
            )
        return SBMExporter(self._encoder_options(config))

    @staticmethod
    def _encoder_options(config: SBMConfig) -> EncoderOptions:
        return EncoderOptions(
            emit_implicit_header=config.encoder.emit_implicit_header,
            compact=config.encoder.compact,
        )

    def _write_stdout(self, content: str) -> None:
        """Write UTF-8 output to stdout, bypassing the locale's encoding."""
        sys.stdout.flush()
        sys.stdout.buffer.write(content.encode("utf-8"))
        sys.stdout.buffer.flush()

    def _run_check(self, text: str, config: SBMConfig) -> int:
        """Compare the input against its canonical encoding."""
        if is_canonical(text, self._encoder_options(config)):
            self.logger.info("Input is already in canonical form")
            return 0

        print("Input is not in canonical form", file=sys.stderr)
        return 1

    def _handle_create_config(self, config_format: str) -> int:
        """Write a sample configuration file to the current directory."""
        output_path = Path(f"sbm_config.{config_format}")

        if output_path.exists():
            print(
                f"Error: Configuration file '{output_path}' already exists",
                file=sys.stderr,
            )
            return 1

        ConfigurationManager.create_sample_config(output_path, config_format)

        print(f"Created configuration file: {output_path}")
        return 0

    def run(self, args=None) -> int:
        """Execute CLI interface."""
        try:
            parsed_args = self.parse_args(args)

            if parsed_args.create_config:
                return self._handle_create_config(parsed_args.create_config)

            validated_args = self.validate_args(parsed_args)
            config = self.process_arguments(validated_args)

            self.logger.info("SBM CLI starting")
            self.logger.info(f"Input: {validated_args['input_path'] or 'stdin'}")
            self.logger.info(f"Output: {validated_args['output_path'] or 'stdout'}")

            text = self._read_input(validated_args["input_path"])

            if validated_args["check"]:
                return self._run_check(text, config)

            document = parse(text)
            exporter = self._build_exporter(config)
            output_path = validated_args["output_path"]

            if output_path is None:
                self._write_stdout(exporter.render(document))
                return 0

            result = exporter.export(document, output_path)
            for warning in result.warnings:
                self.logger.warning(warning)
            self.logger.info(f"Export complete: {result}")
            return 0

        except ValidationError as e:
            print(f"Validation Error: {e}", file=sys.stderr)
            return 1
        except (SBMError, ExportError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        except Exception as e:
            print(f"Error: {e}", file=sys.stderr)
            self.logger.exception("Unexpected error in CLI")
            return 1


def main(args=None):
    """Main entry point for the CLI."""
    cli = CLIInterface()
    return cli.run(args)


if __name__ == "__main__":
    sys.exit(main())
