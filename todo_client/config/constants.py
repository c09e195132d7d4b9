"""
Application constants
"""

# Todo API
TODO_API_DEFAULT_BASE_URL = "https://achasapp.onrender.com/api/"
TASKS_ENDPOINT = "/tasks/"
TASK_ENDPOINT = "/tasks/{task_id}/"

# Task defaults
TASK_DEFAULT_COMPLETED = False

# Filters
FILTER_ALL = "all"
FILTER_PENDING = "pending"
FILTER_COMPLETED = "completed"

# Theme colors
COLOR_ROSE = "#ffcade"
COLOR_PLUM = "#521336"

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_BODY_PREVIEW_CHARS = 1000  # response body chars kept in failure logs
