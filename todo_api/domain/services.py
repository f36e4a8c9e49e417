"""
➡️ But : Contenir la logique métier : orchestrer le store, gérer les erreurs.

TodoService : vérifie que l'élément existe avant lecture, modification ou suppression.

Lève les exceptions HTTP (HTTPException) pour informer proprement le client.

🔹 Avantages :

Code métier découplé du web.

Test unitaire possible sans passer par FastAPI.
"""

import logging
from typing import List

from fastapi import HTTPException, status

from todo_api.domain.models import Todo
from todo_api.domain.repositories import InMemoryTodoRepository

logger = logging.getLogger(__name__)

TODO_NOT_FOUND = "Todo not found"


class TodoService:
    def __init__(self, repo: InMemoryTodoRepository):
        self.repo = repo

    def _not_found(self, todo_id: str) -> HTTPException:
        logger.debug("todo %r not found", todo_id)
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TODO_NOT_FOUND)

    def list(self) -> List[Todo]:
        return self.repo.list()

    def get(self, todo_id: str) -> Todo:
        todo = self.repo.get(todo_id)
        if todo is None:
            raise self._not_found(todo_id)
        return todo

    def create(self, *, title: str, completed: bool) -> Todo:
        todo = self.repo.create(title=title, completed=completed)
        logger.info("todo %s created", todo.id)
        return todo

    def update(self, todo_id: str, *, title: str, completed: bool) -> Todo:
        todo = self.repo.update(todo_id, title=title, completed=completed)
        if todo is None:
            raise self._not_found(todo_id)
        logger.info("todo %s updated", todo.id)
        return todo

    def delete(self, todo_id: str) -> None:
        if not self.repo.delete(todo_id):
            raise self._not_found(todo_id)
        logger.info("todo %s deleted", todo_id)
