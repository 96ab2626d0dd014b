# src/tasklist/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.task_api import TaskDraft, resolve_task_ref, submit_draft
from .render import render_for_settings

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        # Commands that take the rest of the line unsplit (free text).
        self._raw_args: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        raw_args: bool = False,
    ) -> None:
        """
        raw_args=True passes the text after the command name as a single
        argument, with inner whitespace untouched.
        """
        aliases = aliases or []
        names = [name.lower(), *(a.lower() for a in aliases)]
        self._help[names[0]] = help_text
        for key in names:
            self._handlers[key] = handler
            if raw_args:
                self._raw_args.add(key)
            else:
                self._raw_args.discard(key)

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        head = line[1:].split(None, 1)
        if not head:
            return "Empty command. Use /help to list available commands."

        name = head[0].lower()
        rest = head[1] if len(head) > 1 else ""
        if name in self._raw_args:
            args = [rest] if rest.strip() else []
        else:
            args = rest.split()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _split_fields(text: str) -> tuple[str, str] | None:
    """Split "title | description" into stripped parts; None without a separator."""
    if "|" not in text:
        return None
    title, _, description = text.partition("|")
    return title.strip(), description.strip()


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_for_settings(state.task_store.list_tasks(), state.settings)


def cmd_status(state: AppState, args: list[str]) -> str:
    tasks = state.task_store.list_tasks()
    done = sum(1 for t in tasks if t.is_complete)
    return (
        "Status:\n"
        f"  Total: {len(tasks)}\n"
        f"  Complete: {done}\n"
        f"  Incomplete: {len(tasks) - done}"
    )


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <title> | <description>
    """
    usage = "Usage: /add <title> | <description>"
    fields = _split_fields(args[0] if args else "")
    if fields is None:
        return usage

    draft = TaskDraft(title=fields[0], description=fields[1])
    if not draft.can_submit:
        return "Title and description must not be empty. " + usage

    task = submit_draft(state.task_store, draft)
    if task is None:
        return "Task was not added."
    return f"Added: {task.title}"


def cmd_toggle(state: AppState, args: list[str]) -> str:
    """
    /toggle <ref>   ref = list position or id prefix
    """
    if not args:
        return "Usage: /toggle <number or id>"

    task = resolve_task_ref(state.task_store, args[0])
    if task is None or not state.task_store.toggle_complete(task.id):
        return f"No task matches '{args[0]}'."

    toggled = state.task_store.get_task(task.id) or task
    mark = "complete" if toggled.is_complete else "incomplete"
    return f"Marked {mark}: {toggled.title}"


def cmd_edit(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /edit <ref>                          -> show the current values
    /edit <ref> <title> | <description>  -> save new values (completion is kept)
    """
    usage = "Usage: /edit <number or id> <title> | <description>"
    parts = args[0].split(None, 1) if args else []
    if not parts:
        return usage

    ref = parts[0]
    task = resolve_task_ref(state.task_store, ref)
    if task is None:
        return f"No task matches '{ref}'."

    draft = TaskDraft.for_task(task)
    fields = _split_fields(parts[1] if len(parts) > 1 else "")
    if fields is None:
        if emit:
            emit(f"Editing: {draft.title} | {draft.description}")
        return usage

    draft.title, draft.description = fields
    if not draft.can_submit:
        return "Title and description must not be empty. " + usage

    saved = submit_draft(state.task_store, draft)
    if saved is None:
        return f"No task matches '{ref}'."
    return f"Saved: {saved.title}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /delete <number or id>"

    task = resolve_task_ref(state.task_store, args[0])
    if task is None or not state.task_store.delete_task(task.id):
        return f"No task matches '{args[0]}'."
    return f"Deleted: {task.title}"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show all tasks.", aliases=["ls"])
registry.register(
    "add", cmd_add, help_text="Add a task: /add <title> | <description>.", raw_args=True
)
registry.register(
    "toggle",
    cmd_toggle,
    help_text="Mark a task complete/incomplete: /toggle <number or id>.",
    aliases=["done", "x"],
)
registry.register(
    "edit",
    cmd_edit,
    help_text="Edit a task: /edit <number or id> <title> | <description>.",
    raw_args=True,
)
registry.register(
    "delete", cmd_delete, help_text="Delete a task: /delete <number or id>.", aliases=["del", "rm"]
)
registry.register("status", cmd_status, help_text="Show task counts.")
