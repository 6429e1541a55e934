"""Generic command handling: pick a command, then open it.

`CommandHandler` owns exactly one `WebCommand` for the lifetime of a CLI
invocation. It is either handed a pre-built command or asks its adapter to
derive one from the arguments. `Runner` is the one-shot entry used by the CLI.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from core.domain.arguments import Arguments
from core.domain.models import WebCommand
from core.interfaces.opener import UrlOpener
from core.interfaces.site_adapter import SiteAdapter

logger = logging.getLogger(__name__)


class CommandHandler:
    """Holds the command selected for this invocation."""

    def __init__(
        self,
        adapter: SiteAdapter,
        args: Iterable[str] | str | Mapping[str, Any] | Arguments | None = None,
        *,
        command: WebCommand | None = None,
    ) -> None:
        self.adapter = adapter
        if command is None:
            command = self._generate(adapter, args)
        self.command = command
        logger.debug("%s selected %s -> %s", adapter.name, command.action, command.url)

    @staticmethod
    def _generate(adapter: SiteAdapter, args: Any) -> WebCommand:
        # `{"url": ...}` is accepted only by adapters exposing `command_for`
        if isinstance(args, Mapping):
            command_for = getattr(adapter, "command_for", None)
            if command_for is None:
                raise TypeError(f"{adapter.name} does not accept a mapping of arguments")
            return command_for(args)
        cursor = args if isinstance(args, Arguments) else Arguments.of(args)
        return adapter.generate_command(cursor)

    def run(self, opener: UrlOpener) -> WebCommand:
        """Open the held command's URL; opener errors are not caught."""

        opener.open(self.command.url)
        return self.command


class Runner:
    """Build a handler from CLI arguments and run it."""

    def __init__(self, adapter: SiteAdapter, args: Iterable[str] | str | Mapping[str, Any] | None = None) -> None:
        self.handler = CommandHandler(adapter, args)

    @classmethod
    def run_once(
        cls,
        adapter: SiteAdapter,
        args: Iterable[str] | str | Mapping[str, Any] | None,
        opener: UrlOpener,
    ) -> WebCommand:
        return cls(adapter, args).run(opener)

    def run(self, opener: UrlOpener) -> WebCommand:
        return self.handler.run(opener)
