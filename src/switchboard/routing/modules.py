"""Command modules — groups of commands sharing a prefix.

Handlers are plain methods marked with :func:`command`. A
:class:`ContextParameterModule` additionally installs a low-priority
router for each of its prefixes that reads a leading entity reference,
binds it to the context and re-dispatches the rest of the text under
the module prefix.
"""

from __future__ import annotations

import inspect
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from switchboard.routing.engine import CommandInfo, Parameter
from switchboard.routing.preconditions import MustNotHaveContext, Precondition

if TYPE_CHECKING:
    from switchboard.domain.entities import Member, System
    from switchboard.routing.context import CommandContext
    from switchboard.routing.engine import CommandEngine, Handler
    from switchboard.routing.readers import TypeReader
    from switchboard.services.result import ServiceResult

logger = logging.getLogger(__name__)

# Routers only run when nothing more specific matches the raw text.
CONTEXT_ROUTER_PRIORITY = -9999

_SPEC_ATTR = "__switchboard_command__"


@dataclass(frozen=True)
class CommandSpec:
    """What the :func:`command` decorator records on a handler."""

    names: tuple[str, ...]
    summary: str
    parameters: tuple[Parameter, ...]
    preconditions: tuple[Precondition, ...]
    priority: int


def command(
    *names: str,
    summary: str | None = None,
    parameters: tuple[Parameter, ...] = (),
    preconditions: tuple[Precondition, ...] = (),
    priority: int = 0,
) -> Callable[[Callable[..., ServiceResult]], Callable[..., ServiceResult]]:
    """Mark a module method as a command.

    Each name is a space-separated path under the module prefix; ``""``
    is the bare prefix. The summary defaults to the docstring's first
    line.
    """

    def decorate(func: Callable[..., ServiceResult]) -> Callable[..., ServiceResult]:
        doc = inspect.getdoc(func) or ""
        spec = CommandSpec(
            names=names or ("",),
            summary=summary if summary is not None else doc.split("\n", 1)[0],
            parameters=parameters,
            preconditions=preconditions,
            priority=priority,
        )
        setattr(func, _SPEC_ATTR, spec)
        return func

    return decorate


class CommandModule:
    """Base for a group of commands registered under shared prefixes."""

    prefix: ClassVar[str] = ""
    aliases: ClassVar[tuple[str, ...]] = ()

    @property
    def prefixes(self) -> tuple[str, ...]:
        return (self.prefix, *self.aliases)

    def build(self, engine: CommandEngine) -> None:
        """Register every decorated handler under every prefix."""
        self._engine = engine
        for prefix in self.prefixes:
            for handler, spec in self._handlers():
                for name in spec.names:
                    path = tuple(p for p in (prefix, *name.split()) if p)
                    engine.add_command(
                        CommandInfo(
                            path=path,
                            handler=handler,
                            summary=spec.summary,
                            priority=spec.priority,
                            parameters=spec.parameters,
                            preconditions=spec.preconditions,
                            hidden=prefix != self.prefix,
                        )
                    )

    def _handlers(self) -> Iterator[tuple[Handler, CommandSpec]]:
        for attr in sorted(dir(type(self))):
            func = getattr(type(self), attr, None)
            spec = getattr(func, _SPEC_ATTR, None)
            if isinstance(spec, CommandSpec):
                yield getattr(self, attr), spec


class ContextParameterModule[T: (System, Member)](CommandModule, ABC):
    """Module whose commands operate on a referenced entity of type ``T``.

    ``<prefix> <reference> <subcommand...>`` is handled in two passes:
    the router reads ``<reference>`` with :attr:`reader`, binds it to
    the context, then runs ``<prefix> <subcommand...>`` through the
    engine again. Subcommands read the entity back via
    :meth:`context_entity`.
    """

    entity_type: ClassVar[type[System] | type[Member]]
    context_noun: ClassVar[str] = ""

    @property
    @abstractmethod
    def reader(self) -> TypeReader:
        """Reader resolving the context reference."""

    def context_entity(self, ctx: CommandContext) -> T | None:
        return ctx.get_context_entity(self.entity_type)  # type: ignore[return-value]

    def build(self, engine: CommandEngine) -> None:
        for prefix in self.prefixes:
            engine.add_command(
                CommandInfo(
                    path=(prefix,),
                    handler=self._router(engine),
                    summary=f"Run a {self.prefix} command on another {self.context_noun}.",
                    priority=CONTEXT_ROUTER_PRIORITY,
                    parameters=(
                        Parameter("context_value", reader=self.reader),
                        Parameter("rest", default="", remainder=True),
                    ),
                    preconditions=(MustNotHaveContext(),),
                    hidden=True,
                )
            )
        super().build(engine)

    def _router(self, engine: CommandEngine) -> Handler:
        def route(ctx: CommandContext, context_value: Any, rest: str) -> ServiceResult:
            ctx.set_context_entity(context_value)
            logger.debug("Bound %s %s", self.context_noun, context_value.hid)
            return engine.execute(ctx, f"{self.prefix} {rest}")

        return route
