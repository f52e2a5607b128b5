# routes.py
from fastapi import FastAPI
from controller.catalog_controller import catalog_router
from controller.generation_controller import generation_router


def register_routes(app: FastAPI) -> None:
    """Register & Access control controllers here."""
    app.include_router(generation_router)
    app.include_router(catalog_router)
