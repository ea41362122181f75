"""CommandEngine — the command registry and executor.

Commands are keyed by an alias path (``("system", "member", "list")``)
matched case-insensitively against the leading tokens of the command
text. Several commands may match the same text; they are tried in order
of priority, then path length, and the first whose preconditions pass
and whose arguments parse is run::

    "system abcd member list"
        ├─ system            (prio 0)      too many arguments → skip
        └─ system <ref> ...  (prio -9999)  reads "abcd", binds it,
                                           re-enters execute("system member list")
                                               ├─ system member list  ← runs
                                               └─ system <ref> ...    guard fails

When nothing runs, the most advanced failure is reported: an argument
that failed to resolve beats a failed precondition, which beats an
argument-count mismatch. Count mismatches and failed re-entry both
surface as the generic unknown-command error.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from switchboard.domain.references import split_leading, tokenize
from switchboard.routing.readers import StringReader, TypeReader
from switchboard.services.result import ErrorCode, ServiceResult
from switchboard.services.telemetry import trace_span

if TYPE_CHECKING:
    from switchboard.routing.context import CommandContext
    from switchboard.routing.preconditions import Precondition

logger = logging.getLogger(__name__)

Handler = Callable[..., ServiceResult]


class _Required:
    def __repr__(self) -> str:
        return "REQUIRED"


REQUIRED: Any = _Required()

# Failure ranking when no candidate runs.
_STAGE_ARG_COUNT = 0
_STAGE_PRECONDITION = 1
_STAGE_READ = 2


def unknown_command() -> ServiceResult:
    """The generic "no such command" failure."""
    return ServiceResult.failure("unknown", ErrorCode.UNKNOWN_COMMAND, "Unknown command.")


@dataclass(frozen=True)
class Parameter:
    """One declared command argument.

    A remainder parameter consumes all remaining text verbatim and must
    come last.
    """

    name: str
    reader: TypeReader = field(default_factory=StringReader)
    default: Any = REQUIRED
    remainder: bool = False

    @property
    def optional(self) -> bool:
        return self.default is not REQUIRED


@dataclass
class CommandInfo:
    """A registered command."""

    path: tuple[str, ...]
    handler: Handler
    summary: str = ""
    priority: int = 0
    parameters: tuple[Parameter, ...] = ()
    preconditions: tuple[Precondition, ...] = ()
    hidden: bool = False

    @property
    def name(self) -> str:
        return " ".join(self.path)

    @property
    def usage(self) -> str:
        parts = list(self.path)
        for param in self.parameters:
            label = f"{param.name}..." if param.remainder else param.name
            parts.append(f"[{label}]" if param.optional else f"<{label}>")
        return " ".join(parts)


@dataclass(frozen=True)
class SearchMatch:
    """A command whose path prefixes the text, with the text left over."""

    command: CommandInfo
    remainder: str


class CommandEngine:
    """Registry plus executor for text commands.

    ``execute`` may be re-entered from inside a handler with the same
    context; the inner call finishes before the outer one returns.
    """

    def __init__(self) -> None:
        self._commands: list[CommandInfo] = []

    @property
    def commands(self) -> list[CommandInfo]:
        return list(self._commands)

    def add_command(self, command: CommandInfo) -> None:
        """Register *command*.

        Raises:
            ValueError: If the path is empty or a remainder parameter is
                not last.
        """
        if not command.path:
            raise ValueError("Command path must contain at least one token")
        for param in command.parameters[:-1]:
            if param.remainder:
                raise ValueError(f"Remainder parameter '{param.name}' must be last")
        self._commands.append(command)

    def add_modules(self, modules: Iterable[Any]) -> None:
        """Let each module register its commands on this engine."""
        for module in modules:
            module.build(self)

    def search(self, text: str) -> list[SearchMatch]:
        """All commands whose path prefixes *text*, in trial order."""
        tokens = [t.lower() for t in tokenize(text)]
        found: list[tuple[int, SearchMatch]] = []
        for index, command in enumerate(self._commands):
            depth = len(command.path)
            if len(tokens) < depth:
                continue
            if tuple(tokens[:depth]) != tuple(p.lower() for p in command.path):
                continue
            _, rest = split_leading(text, depth)
            found.append((index, SearchMatch(command=command, remainder=rest)))

        found.sort(key=lambda item: (-item[1].command.priority, -len(item[1].command.path), item[0]))
        return [match for _, match in found]

    def execute(self, ctx: CommandContext, text: str) -> ServiceResult:
        """Run the best-matching command for *text* against *ctx*."""
        with trace_span("dispatch") as span:
            if span is not None:
                span.annotate("text", text)

            matches = self.search(text)
            if not matches:
                logger.debug("No command matches %r", text)
                return unknown_command()

            best: tuple[int, ServiceResult] | None = None
            for match in matches:
                command = match.command
                outcome = self._prepare(ctx, command, match.remainder)
                if isinstance(outcome, tuple):
                    stage, failure = outcome
                    if best is None or stage > best[0]:
                        best = (stage, failure)
                    continue

                if span is not None:
                    span.annotate("command", command.name)
                logger.debug("Running %s (priority %d)", command.name, command.priority)
                return command.handler(ctx, **outcome)

            assert best is not None
            stage, failure = best
            if stage == _STAGE_ARG_COUNT:
                return unknown_command()
            return failure

    def _prepare(
        self, ctx: CommandContext, command: CommandInfo, text: str
    ) -> dict[str, Any] | tuple[int, ServiceResult]:
        """Check preconditions, then parse arguments.

        Returns the keyword arguments for the handler, or a
        ``(stage, failure)`` pair.
        """
        for precondition in command.preconditions:
            result = precondition.check(ctx, command)
            if not result.ok:
                return _STAGE_PRECONDITION, result

        values: dict[str, Any] = {}
        rest = text
        for param in command.parameters:
            if param.remainder:
                raw, rest = rest.strip(), ""
            else:
                tokens, rest = split_leading(rest, 1)
                raw = tokens[0] if tokens else ""

            if not raw:
                if not param.optional:
                    return _STAGE_ARG_COUNT, _bad_arg_count(command, "too few")
                values[param.name] = param.default
                continue

            read = param.reader.read(ctx, raw)
            if not read.ok:
                return _STAGE_READ, ServiceResult(ok=False, op=command.name, error=read.error)
            values[param.name] = read.value

        if rest.strip():
            return _STAGE_ARG_COUNT, _bad_arg_count(command, "too many")
        return values


def _bad_arg_count(command: CommandInfo, which: str) -> ServiceResult:
    return ServiceResult.failure(
        command.name,
        ErrorCode.BAD_ARG_COUNT,
        f"The input text has {which} parameters.",
        usage=command.usage,
    )
