"""
➡️ But : Définir les formats d’entrée/sortie de l’API (couche validation).

Contient les modèles Pydantic utilisés par FastAPI :

TodoIn → corps de requête POST et PUT

TodoOut → réponse de l’API

🔹 Avantages :

Validation automatique de la forme du JSON (types stricts : "true" ou 1 ne passent pas pour un booléen).

Documente les champs dans Swagger (types, exemples...).
"""

from pydantic import BaseModel, Field, StrictBool, StrictStr


class TodoIn(BaseModel):
    # champs absents -> valeur zéro, champs inconnus (dont "id") ignorés
    title: StrictStr = Field("", examples=["Acheter du lait"])
    completed: StrictBool = Field(False, examples=[False])


class TodoOut(BaseModel):
    id: str
    title: str
    completed: bool

    model_config = {"from_attributes": True}


class ErrorOut(BaseModel):
    error: str
