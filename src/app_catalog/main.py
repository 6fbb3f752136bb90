from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.errors import register_exception_handlers
from .api.routers import router as apps_router
from .config import settings
from .observability.logging_setup import setup_logging

# Configure logging from settings (LOG_LEVEL in .env)
setup_logging()

app = FastAPI(title=settings.app_name)

# CORS for the browser front end that renders the paged list
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

register_exception_handlers(app)
app.include_router(apps_router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    return {"status": "ok"}
