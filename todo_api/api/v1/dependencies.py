"""
➡️ But : Centraliser les dépendances réutilisables des routes.

get_todo_repository() : renvoie le store possédé par l'application (app.state).

get_todo_service() : crée un TodoService à partir de ce store.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

En test, chaque create_app() a son propre store : aucun état partagé entre tests.
"""

from fastapi import Depends, Request

from todo_api.domain.repositories import InMemoryTodoRepository
from todo_api.domain.services import TodoService


def get_todo_repository(request: Request) -> InMemoryTodoRepository:
    return request.app.state.todo_repository


def get_todo_service(
    repo: InMemoryTodoRepository = Depends(get_todo_repository),
) -> TodoService:
    return TodoService(repo)
