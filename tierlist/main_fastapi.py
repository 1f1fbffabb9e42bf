from fastapi import FastAPI

from tierlist import config
from tierlist.middleware.error_handler import ErrorHandlerMiddleware, setup_exception_handlers
from tierlist.observability.logger import configure_logging
from tierlist.routers.health import router as health_router
from tierlist.routers.og import router as og_router
from tierlist.routers.state import router as state_router

configure_logging(config)

app = FastAPI(
    title="Tier List Share API",
    description="Stateless encode/decode of shareable tier list links",
    version="1.0.0",
)

# Error handler should be outermost to catch all errors
app.add_middleware(ErrorHandlerMiddleware, debug=config.DEBUG)

# Register exception handlers
setup_exception_handlers(app)

# Include routers
app.include_router(health_router)  # Health checks at root level
app.include_router(state_router, prefix="/api")
app.include_router(og_router, prefix="/api")