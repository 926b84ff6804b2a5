import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.core.log_config import setup_logging
from app.db.session import init_db
from app.api.error_handlers import register_error_handlers

from app.api.auth.routes import router as auth_router
from app.api.project.routes import router as project_router
from app.api.task.routes import router as task_router
from app.api.todo.routes import router as todo_router
from app.api.stats.routes import router as stats_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    init_db()
    logger.info("Task tracker API started (env=%s)", settings.ENV)
    yield
    logger.info("Task tracker API shutting down")

app = FastAPI(title="Task Tracker API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Routers
app.include_router(auth_router, prefix="/api/auth", tags=["Auth"])
app.include_router(project_router, prefix="/api/projects", tags=["Projects"])
app.include_router(task_router, prefix="/api/tasks", tags=["Tasks"])
app.include_router(todo_router, prefix="/api/todos", tags=["Todos"])
app.include_router(stats_router, prefix="/api/stats", tags=["Stats"])

@app.get("/api/health")
def health():
    return {"success": True, "message": "API is running"}
