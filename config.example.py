# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKLINE_APP_NAME": "Name used in the welcome message (default: Duke).",
    "TASKLINE_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TASKLINE_LOG_TO_FILE": "Also write a DEBUG log to <data_dir>/taskline.log (true/false).",
    "TASKLINE_DATA_DIR": "Local data directory for the log file (default: .local/taskline).",
    # Task list
    "TASKLINE_MAX_TASKS": "Maximum number of tasks in a session (default: 100).",
    # Console
    "TASKLINE_BORDER_WIDTH": "Length of the border drawn around replies (default: 60).",
}
