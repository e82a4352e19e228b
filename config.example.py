# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
See src/tasklist/config.py for parsing rules; blank or invalid values fall back to defaults.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name used in logs (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level on stderr (default: WARNING).",
    "TASKLIST_LOG_TO_FILE": "Also write DEBUG logs to <log_dir>/tasklist.log (true/false, default: false).",
    "TASKLIST_LOG_DIR": "Directory for the log file (default: .local/tasklist).",
    # Console
    "TASKLIST_PROMPT": 'Prompt written before every line (default: "> ").',
    "TASKLIST_QUIT_COMMAND": "Exact line that ends the session (default: quit).",
    # Behavior
    "TASKLIST_RESET_EXISTING_PROJECTS": (
        "true: 'add project' on an existing name empties it; "
        "false (default): the command is rejected and the project is kept."
    ),
}
