# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.render import render_for_settings
from ..core.state import AppState
from ..tasks.task_models import TaskEvent

logger = logging.getLogger(__name__)

PROMPT = ">>> "
EXIT_COMMANDS = ("/exit", "/quit")


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def run_console_loop(state: AppState) -> None:
    """
    Interactive view layer over the task store.

    Every line is a slash command. After a command that changed the store,
    the task list is re-rendered (driven by the store's change notifications).
    """
    logger.info("Console connector started.")
    _print_ts("[CONSOLE] Use /help for commands, /add <title> | <description> to add a task, /exit to quit.\n")

    pending: list[TaskEvent] = []

    def on_change(event: TaskEvent) -> None:
        logger.debug("Console saw change=%s task_id=%s", event.change, event.task.id)
        pending.append(event)

    def emit(text: str) -> None:
        print(f"[{_ts_local()}] {text}", flush=True)

    unsubscribe = state.task_store.subscribe(on_change)
    try:
        print(render_for_settings(state.task_store.list_tasks(), state.settings))

        while True:
            try:
                user_input = input(PROMPT).strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                print()
                break

            if not user_input:
                continue

            if user_input.lower() in EXIT_COMMANDS:
                logger.info("Console exit command received.")
                break

            pending.clear()
            try:
                cmd_response = command_registry.handle(state, user_input, emit=emit)
            except Exception:
                logger.exception("Command handler crashed.")
                cmd_response = "Internal error while handling a command."

            if cmd_response is None:
                cmd_response = "Commands start with '/'. Use /help to list available commands."

            _print_ts(cmd_response)

            if pending:
                print(render_for_settings(state.task_store.list_tasks(), state.settings))
    finally:
        unsubscribe()

    logger.info("Console connector finished.")
