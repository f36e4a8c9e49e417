"""
➡️ But : Fournir les todos présents au démarrage.

Par défaut : les 3 todos historiques.
Si SEED_PATH est défini : lecture d'un YAML de la forme

todos:
  - title: "Learn Go"
    completed: false
  - id: "7"
    title: "Deploy to production"
"""

import re
from pathlib import Path
from typing import Any, Dict, List

import yaml

from todo_api.core.config import Settings
from todo_api.domain.models import Todo

SEED_ID_RE = re.compile(r"[1-9][0-9]*")

DEFAULT_TODOS: List[Todo] = [
    Todo(id="1", title="Learn Go", completed=False),
    Todo(id="2", title="Build a web app", completed=False),
    Todo(id="3", title="Deploy to production", completed=False),
]


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: str | Path) -> List[Todo]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed YAML not found: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Seed YAML must contain a root mapping.")

    rows = data.get("todos", [])
    if not isinstance(rows, list):
        raise ValueError("Seed YAML key 'todos' must be a list.")

    todos: List[Todo] = []
    last_id = 0
    for i, item in enumerate(rows, start=1):
        if not isinstance(item, dict) or "title" not in item:
            raise ValueError(f"Invalid seed entry at position {i} in {path} (mapping with 'title' expected).")

        # sans id : valeur suivant le plus grand id déjà vu
        todo_id = _seed_id(item["id"], position=i) if "id" in item else str(last_id + 1)
        if any(t.id == todo_id for t in todos):
            raise ValueError(f"Duplicate seed id {todo_id!r} at position {i} in {path}.")

        todos.append(_todo_from_row(item, todo_id=todo_id))
        last_id = max(last_id, int(todo_id))
    return todos


def _seed_id(raw: Any, *, position: int) -> str:
    """Id explicite : entier décimal strictement positif, sans zéro en tête."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        raw = str(raw)
    if not isinstance(raw, str) or not SEED_ID_RE.fullmatch(raw):
        raise ValueError(f"Invalid seed id {raw!r} at position {position} (positive integer expected).")
    return raw


def _todo_from_row(item: Dict[str, Any], *, todo_id: str) -> Todo:
    # strict : "no" ou 1 ne passent pas pour un booléen (ValidationError est un ValueError)
    return Todo.model_validate(
        {"id": todo_id, "title": item["title"], "completed": item.get("completed", False)},
        strict=True,
    )


# -----------------------------
# Main entrypoint
# -----------------------------
def build_seed(settings: Settings) -> List[Todo]:
    if not settings.SEED_PATH:
        return [t.model_copy() for t in DEFAULT_TODOS]
    return load_seed_yaml(settings.SEED_PATH)
