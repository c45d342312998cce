from typing import Any, Dict

DEBUG = False
CONFIG: Dict[str, Any] = {}

TASKS_DIR = 'tasks'

DEFAULT_FUNCTION_NAME = 'solution_func'
DEFAULT_TIME_LIMIT = 1.0  # seconds
WALL_TIME_LIMIT = 20  # seconds, for the child process to start up
