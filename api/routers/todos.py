from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse, Response

from api.domain.schemas import TodoCreate, TodoOut, TodoUpdate
from api.services.todo_service import TodoError, TodoNotFoundError, TodoService

router = APIRouter(prefix="/todos", tags=["todos"])


def _get_todo_service(request: Request) -> TodoService:
    svc = getattr(getattr(request.app, "state", None), "todo_service", None)
    if not svc:
        raise RuntimeError("TodoService nao configurado")
    return svc


def _not_found() -> Response:
    return Response(status_code=404)


def _error_response(err: TodoError) -> JSONResponse:
    return JSONResponse({"ok": False, "error": err.code, "message": err.message}, status_code=err.status_code)


@router.get("", response_model=list[TodoOut])
def list_todos(request: Request):
    svc = _get_todo_service(request)
    return [todo.to_dict() for todo in svc.list_todos()]


@router.get("/{todo_id}", response_model=TodoOut)
def get_todo(todo_id: int, request: Request):
    svc = _get_todo_service(request)
    try:
        todo = svc.get_todo(todo_id)
    except TodoNotFoundError:
        return _not_found()
    return todo.to_dict()


@router.post("", response_model=TodoOut, status_code=201)
def create_todo(payload: TodoCreate, request: Request):
    svc = _get_todo_service(request)
    return svc.create_todo(payload.title, payload.completed).to_dict()


@router.delete("/{todo_id}")
def delete_todo(todo_id: int, request: Request):
    svc = _get_todo_service(request)
    try:
        svc.delete_todo(todo_id)
    except TodoNotFoundError:
        return _not_found()
    return Response(status_code=200)


@router.patch("/{todo_id}", response_model=TodoOut)
def update_todo(todo_id: int, request: Request, payload: Optional[TodoUpdate] = Body(None)):
    svc = _get_todo_service(request)
    try:
        todo = svc.update_todo(todo_id, payload.changes() if payload else None)
    except TodoNotFoundError:
        return _not_found()
    except TodoError as exc:
        return _error_response(exc)
    return todo.to_dict()
