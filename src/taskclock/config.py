"""Fixed settings for the task timer.

None of these are read from the environment or the command line.
"""

TIMEOUT_MS = 5_000
TICK_INTERVAL_MS = 1

TASK_CHAR_LIMIT = 280
ENTRY_WIDTH = 30

VIEWPORT_WIDTH = 30
VIEWPORT_HEIGHT = 5
WELCOME_TEXT = "Enter a new task"

HELP_SEPARATOR = " • "
