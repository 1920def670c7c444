"""HTTP Controllers."""

from product.presentation.http.controllers.comparison import router as comparison_router
from product.presentation.http.controllers.health import router as health_router

__all__ = ["comparison_router", "health_router"]
