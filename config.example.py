# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKBOOK_APP_NAME": "Banner shown when the menu starts (default: Task Manager).",
    "TASKBOOK_LOG_LEVEL": "Console logging level (default: WARNING; the log file always gets DEBUG).",
    # Paths (gitignored)
    "TASKBOOK_DATA_DIR": "Local data directory (default: .local/taskbook).",
    "TASKBOOK_TASKS_PATH": "Task file path (default: <data_dir>/tasks.json).",
    "TASKBOOK_LOG_DIR": "Directory for taskbook.log (default: <data_dir>).",
    # Store
    "TASKBOOK_MAX_TASKS": "Maximum number of tasks; 0 = unlimited (default: 100).",
}
