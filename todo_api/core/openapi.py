"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) complète le schéma généré par FastAPI avec une description
des conventions de l'API, et le met en cache sur l'app.
"""

from fastapi.openapi.utils import get_openapi


def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API de todos en mémoire (FastAPI).\n\n"
            "### Conventions\n"
            "- Les ids sont des chaînes décimales attribuées par le serveur.\n"
            "- Les erreurs ont la forme `{\"error\": \"...\"}`.\n"
            "- Aucune persistance : la liste repart des todos de seed à chaque démarrage.\n"
        ),
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
