"""Subcommands of the `ag-csharp` command line."""

from ag_csharp.commands import init, listing, update, validate, version
from ag_csharp.commands.context import (
    COMMAND_NAME,
    DISTRIBUTION_NAME,
    KIT_NAME,
    CommandContext,
)

# Registration order is the order shown in --help.
COMMANDS = (init, update, listing, validate, version)

__all__ = ["COMMANDS", "COMMAND_NAME", "DISTRIBUTION_NAME", "KIT_NAME", "CommandContext"]
