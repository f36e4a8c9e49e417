"""
➡️ But : Définir l’objet manipulé par le store (ici : Todo).

Pas d’ORM : la collection vit en mémoire, le modèle est un simple BaseModel Pydantic.

Champs : id (texte décimal attribué par le store), title, completed.
"""

from pydantic import BaseModel


class Todo(BaseModel):
    id: str
    title: str
    completed: bool = False
