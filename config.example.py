# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Paths
    "TASKLIST_DATA_DIR": "Local directory for the log file (default: .local/tasklist).",
    # Connectors
    "TASKLIST_CONSOLE_ENABLED": "Run the interactive console (true/false, default: true).",
    # Presentation
    "TASKLIST_LIST_TITLE": "Heading above the task list (default: My Tasks).",
    "TASKLIST_EMPTY_TEXT": "Text shown when there are no tasks (default: Nothing to show yet.).",
    "TASKLIST_SHOW_IDS": "Show a short task id next to each title (true/false, default: false).",
}
