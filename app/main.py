import logging

from fastapi import FastAPI

from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.routers import me, menu_item_reviews, recommendations, ucsb_dining_commons_menu_items

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.project_name,
    version="1.0.0",
)

register_exception_handlers(app)

# Include routers
app.include_router(recommendations.router, prefix=settings.api_prefix)
app.include_router(menu_item_reviews.router, prefix=settings.api_prefix)
app.include_router(ucsb_dining_commons_menu_items.router, prefix=settings.api_prefix)
app.include_router(me.router, prefix=settings.api_prefix)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Welcome to the Dining Commons API",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
