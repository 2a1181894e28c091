from typing import List, Optional
from uuid import uuid4

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.routing import Match
import uvicorn

from .readme import render_readme
from .schemas import Task
from .store import TaskStore, log


PORT = 8012
TASK_NOT_FOUND = "Task not found"

router = APIRouter()


def allowed_methods(request: Request) -> List[str]:
    """Every method served by the routes whose path matches the request."""
    methods = set()
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match != Match.NONE:
            methods.update(getattr(route, "methods", None) or ())
    return sorted(methods)


def get_store(request: Request) -> TaskStore:
    return request.app.state.store


def _decode_error_text(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


async def read_task_body(request: Request) -> Task:
    """
    Decode the raw request body as a Task.

    The Content-Type header is not consulted; any body that is a JSON object
    with string-typed fields is accepted.
    """
    body = await request.body()
    try:
        return Task.model_validate_json(body)
    except ValidationError as exc:
        detail = _decode_error_text(exc)
        log(f"Rejected body on {request.method} {request.url.path}: {detail}")
        raise HTTPException(status_code=400, detail=detail)


@router.get("/", response_class=PlainTextResponse)
def readme():
    return render_readme()


@router.get("/tasks", response_model=List[Task])
def list_tasks(store: TaskStore = Depends(get_store)):
    tasks = store.list_tasks()
    log(f"List request -> {len(tasks)} tasks")
    return tasks


@router.post("/tasks", response_model=Task, status_code=201)
def create_task(payload: Task = Depends(read_task_body), store: TaskStore = Depends(get_store)):
    # client-supplied ids are discarded
    task = payload.model_copy(update={"id": str(uuid4())})
    store.append(task)
    log(f"New task created: id={task.id} title={task.title!r} status={task.status!r}")
    return task


@router.put("/task/{task_id:path}", response_model=Task)
def update_task(
    task_id: str,
    payload: Task = Depends(read_task_body),
    store: TaskStore = Depends(get_store),
):
    updated = store.replace_by_id(task_id, payload.model_copy(update={"id": task_id}))
    if updated is None:
        log(f"Update request for unknown id={task_id}")
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)
    log(f"Task updated: id={task_id} title={updated.title!r} status={updated.status!r}")
    return updated


@router.delete("/task/{task_id:path}")
def delete_task(task_id: str, store: TaskStore = Depends(get_store)):
    if not store.remove_by_id(task_id):
        log(f"Delete request for unknown id={task_id}")
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)
    log(f"Task deleted: id={task_id}")
    return Response(status_code=200)


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    # 405 carries only the Allow header, no body
    if exc.status_code == 405:
        return Response(status_code=405, headers={"Allow": ", ".join(allowed_methods(request))})
    return await http_exception_handler(request, exc)


def create_app(store: Optional[TaskStore] = None) -> FastAPI:
    app = FastAPI(title="Task Manager Service")
    app.state.store = store if store is not None else TaskStore()
    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)
    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    print(f"Server is starting on port: {PORT}")
    uvicorn.run("taskapi.main:app", host="0.0.0.0", port=PORT, log_level="info")
