"""Routing core — context, readers, guard, engine, and modules.

Routing may import from domain and services (result types, contracts,
telemetry). It must never import from bot, commands, or output.
"""

from switchboard.routing.context import BoundEntity, CommandContext
from switchboard.routing.engine import CommandEngine, CommandInfo, Parameter, unknown_command
from switchboard.routing.modules import (
    CONTEXT_ROUTER_PRIORITY,
    CommandModule,
    ContextParameterModule,
    command,
)
from switchboard.routing.preconditions import MustNotHaveContext, Precondition
from switchboard.routing.readers import (
    MemberReferenceReader,
    StringReader,
    SystemReferenceReader,
    TypeReader,
)

__all__ = [
    "BoundEntity",
    "CONTEXT_ROUTER_PRIORITY",
    "CommandContext",
    "CommandEngine",
    "CommandInfo",
    "CommandModule",
    "ContextParameterModule",
    "MemberReferenceReader",
    "MustNotHaveContext",
    "Parameter",
    "Precondition",
    "StringReader",
    "SystemReferenceReader",
    "TypeReader",
    "command",
    "unknown_command",
]
