"""
➡️ But : Encapsuler toutes les opérations sur la collection de todos.

InMemoryTodoRepository : CRUD (create, read, update, delete) sur une liste ordonnée en mémoire.

Ne contient aucune logique métier, juste le stockage.

🔹 Avantages :

Un objet explicite possède la collection (pas de variable globale) : chaque app / test a la sienne.

Un verrou unique protège chaque opération (FastAPI exécute les routes sync dans un pool de threads).
"""

import threading
from typing import Iterable, List, Optional

from todo_api.domain.models import Todo


def _numeric_id(todo_id: str) -> int:
    """Valeur entière d'un id, 0 si l'id n'est pas numérique."""
    try:
        return int(todo_id)
    except ValueError:
        return 0


class InMemoryTodoRepository:
    """
    Liste ordonnée de Todo, ordre d'insertion conservé.

    Les ids viennent d'un compteur monotone initialisé sur le plus grand id
    numérique du seed : un id supprimé n'est jamais réattribué.
    Les Todo retournés sont des copies.
    """

    def __init__(self, seed: Iterable[Todo] = ()):
        self._lock = threading.Lock()
        self._items: List[Todo] = [t.model_copy() for t in seed]
        self._last_id = max([0] + [_numeric_id(t.id) for t in self._items])

    # ---------- READ ----------

    def list(self) -> List[Todo]:
        with self._lock:
            return [t.model_copy() for t in self._items]

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def get(self, todo_id: str) -> Optional[Todo]:
        with self._lock:
            index = self._index_of(todo_id)
            if index is None:
                return None
            return self._items[index].model_copy()

    # ---------- CREATE ----------

    def create(self, *, title: str, completed: bool = False) -> Todo:
        with self._lock:
            self._last_id += 1
            todo = Todo(id=str(self._last_id), title=title, completed=completed)
            self._items.append(todo)
            return todo.model_copy()

    # ---------- UPDATE ----------

    def update(self, todo_id: str, *, title: str, completed: bool) -> Optional[Todo]:
        with self._lock:
            index = self._index_of(todo_id)
            if index is None:
                return None
            todo = self._items[index]
            todo.title = title
            todo.completed = completed
            return todo.model_copy()

    # ---------- DELETE ----------

    def delete(self, todo_id: str) -> bool:
        with self._lock:
            index = self._index_of(todo_id)
            if index is None:
                return False
            del self._items[index]
            return True

    # lock held by caller
    def _index_of(self, todo_id: str) -> Optional[int]:
        for i, todo in enumerate(self._items):
            if todo.id == todo_id:
                return i
        return None
