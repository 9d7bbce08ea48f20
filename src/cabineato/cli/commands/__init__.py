"""CLI command implementations for the cabineato application.

This package contains subcommands for the cabineato CLI:
- validate: Validate a configuration file
- build: Generate an assembly as JSON
- summary: Show part counts for a configuration
"""

from cabineato.cli.commands.build import build_command, summary_command
from cabineato.cli.commands.validate import validate_command

__all__ = ["build_command", "summary_command", "validate_command"]
