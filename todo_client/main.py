"""
Main application entry point
"""

import uvicorn
from todo_client.config.settings import settings
from todo_client.utils.logger import logger


def main():
    """Serve the task list screen"""
    settings.validate()
    logger.info(f"Using todo service at {settings.TODO_API_BASE_URL}")
    uvicorn.run(
        "todo_client.web.main:app",
        host=settings.WEB_HOST,
        port=settings.WEB_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
