from tricking.api.categories import router as categories_router
from tricking.api.combos import router as combos_router
from tricking.api.health import router as health_router
from tricking.api.tricks import router as tricks_router

__all__ = [
    "categories_router",
    "combos_router",
    "health_router",
    "tricks_router",
]
