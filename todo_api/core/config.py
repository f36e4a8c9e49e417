"""
➡️ But : Centraliser tous les paramètres configurables (nom d’app, port, niveau de log, seed...).

Utilise pydantic-settings pour charger automatiquement les variables d’environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from todo_api.core.config import settings
print(settings.APP_NAME)


🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Sans aucune variable définie, le service écoute sur :8080 avec les 3 todos par défaut.
"""

from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Todo-API"
    ENV: str = "dev"  # dev | prod | test

    # -----------------------------
    # Serveur HTTP
    # -----------------------------
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    CORS_ORIGINS: List[str] = ["*"]

    # -----------------------------
    # Logs
    # -----------------------------
    LOG_LEVEL: str = "INFO"

    # -----------------------------
    # Seed
    # -----------------------------
    # Fichier YAML optionnel (clé `todos:`) qui remplace les todos par défaut.
    SEED_PATH: Optional[str] = None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    def model_post_init(self, __context):
        object.__setattr__(self, "LOG_LEVEL", self.LOG_LEVEL.upper())


# Instance globale importable partout
settings = Settings()
