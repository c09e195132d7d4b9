"""
Web interface: the single task list screen
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
from fastapi import FastAPI, Request, Form, HTTPException
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from todo_client.api.tasks_client import TasksClient
from todo_client.models.state import TaskFilter
from todo_client.services.task_list import TaskListController
from todo_client.utils.logger import logger

templates_dir = Path(__file__).parent / "templates"
templates = Jinja2Templates(directory=str(templates_dir))


def _back_to_screen() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=303)


def create_app(controller: Optional[TaskListController] = None) -> FastAPI:
    """
    Build the screen application

    Args:
        controller: Controller to drive; one backed by a TasksClient is
            created when omitted

    Returns:
        FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_client = controller is None
        app.state.controller = controller or TaskListController(TasksClient())
        logger.info("Loading tasks on startup")
        await app.state.controller.load()
        yield
        if owns_client:
            await app.state.controller.client.close()

    app = FastAPI(title="Todo", lifespan=lifespan)

    def _controller(request: Request) -> TaskListController:
        return request.app.state.controller

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request):
        ctrl = _controller(request)
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "tasks": ctrl.visible_tasks,
                "title": ctrl.title,
                "editing": ctrl.editing,
                "current_filter": ctrl.filter,
                "filters": list(TaskFilter),
                "palette": ctrl.theme.palette,
            },
        )

    @app.post("/tasks")
    async def add_task(request: Request, title: str = Form("")):
        ctrl = _controller(request)
        ctrl.title = title
        await ctrl.add()
        return _back_to_screen()

    @app.post("/tasks/{task_id}/toggle")
    async def toggle_task(request: Request, task_id: int):
        await _controller(request).toggle_complete(task_id)
        return _back_to_screen()

    @app.post("/tasks/{task_id}/delete")
    async def delete_task(request: Request, task_id: int):
        await _controller(request).delete(task_id)
        return _back_to_screen()

    @app.post("/tasks/{task_id}/edit")
    async def edit_task(request: Request, task_id: int):
        _controller(request).begin_edit(task_id)
        return _back_to_screen()

    @app.post("/tasks/{task_id}/save")
    async def save_task(request: Request, task_id: int, text: str = Form("")):
        await _controller(request).commit_edit(task_id, text)
        return _back_to_screen()

    @app.post("/edit/cancel")
    async def cancel_edit(request: Request):
        _controller(request).cancel_edit()
        return _back_to_screen()

    @app.post("/filter/{name}")
    async def set_filter(request: Request, name: str):
        try:
            task_filter = TaskFilter(name)
        except ValueError:
            raise HTTPException(status_code=404, detail=f"Unknown filter: {name}")
        _controller(request).set_filter(task_filter)
        return _back_to_screen()

    @app.post("/theme/toggle")
    async def toggle_theme(request: Request):
        _controller(request).toggle_theme()
        return _back_to_screen()

    return app


app = create_app()
