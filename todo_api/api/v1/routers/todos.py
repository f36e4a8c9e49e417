"""
➡️ But : Définir les endpoints de l’API.

C’est la couche la plus proche du web :

Réceptionne les requêtes HTTP (GET, POST, PUT, DELETE)

Appelle le service correspondant

Retourne les schémas de sortie (response_model)

Chaque fonction représente une route.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from todo_api.api.v1.dependencies import get_todo_service
from todo_api.domain.schemas import ErrorOut, TodoIn, TodoOut
from todo_api.domain.services import TodoService

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
    responses={404: {"model": ErrorOut, "description": "Todo not found"}},
)

INVALID_INPUT_RESPONSE = {400: {"model": ErrorOut, "description": "Invalid input"}}


@router.get(
    "",
    summary="Lister les todos",
    description="Retourne tous les todos, dans l'ordre d'insertion.",
    response_model=List[TodoOut],
    responses={
        200: {
            "description": "Liste complète",
            "content": {
                "application/json": {
                    "example": [{"id": "1", "title": "Learn Go", "completed": False}]
                }
            },
        }
    },
)
def list_todos(svc: TodoService = Depends(get_todo_service)):
    return svc.list()


@router.post(
    "",
    summary="Créer un todo",
    status_code=status.HTTP_201_CREATED,
    response_model=TodoOut,
    responses=INVALID_INPUT_RESPONSE,
)
def create_todo(payload: TodoIn, svc: TodoService = Depends(get_todo_service)):
    return svc.create(title=payload.title, completed=payload.completed)


@router.get(
    "/{todo_id}",
    summary="Récupérer un todo",
    response_model=TodoOut,
)
def get_todo(todo_id: str, svc: TodoService = Depends(get_todo_service)):
    return svc.get(todo_id)


@router.put(
    "/{todo_id}",
    summary="Mettre à jour un todo",
    description="Remplace title et completed ; l'id ne change jamais.",
    response_model=TodoOut,
    responses=INVALID_INPUT_RESPONSE,
)
def update_todo(todo_id: str, payload: TodoIn, svc: TodoService = Depends(get_todo_service)):
    return svc.update(todo_id, title=payload.title, completed=payload.completed)


@router.delete(
    "/{todo_id}",
    summary="Supprimer un todo",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_todo(todo_id: str, svc: TodoService = Depends(get_todo_service)):
    svc.delete(todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
