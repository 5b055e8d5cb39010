from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from bestodo.api.handlers import register_exception_handlers
from bestodo.api.routes import auth, todos
from bestodo.auth.utils import PasswordHasher, TokenService
from bestodo.config.settings import Settings
from bestodo.database.connection import Database
import logging

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Build the API from explicit collaborators.

    Refuses to start without a token signing secret.
    """
    settings = settings or Settings()
    settings.validate()

    logging.basicConfig(level=settings.LOG_LEVEL)

    database = database or Database(settings)
    try:
        database.create_tables()
        logger.info("Database tables created/verified successfully")
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise

    app = FastAPI(title="Bestodo API", version=VERSION)

    app.state.settings = settings
    app.state.database = database
    app.state.password_hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)
    app.state.token_service = TokenService(
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
        expire_hours=settings.TOKEN_EXPIRE_HOURS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET", "POST", "PATCH", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    register_exception_handlers(app)

    # Include routers
    app.include_router(auth.router)
    app.include_router(todos.router)

    @app.get("/")
    def read_root():
        """
        Welcome message with API information
        """
        return {
            "message": "Welcome to Bestodo API",
            "version": VERSION,
            "docs": "/docs",
            "redoc": "/redoc",
            "endpoints": {
                "auth": {
                    "signup": "POST /api/auth/signup",
                    "signin": "POST /api/auth/signin",
                },
                "todos": {
                    "get_todos": "GET /api/todos",
                    "create_todo": "POST /api/todos",
                    "get_todo": "GET /api/todos/{id}",
                    "update_todo_status": "PATCH /api/todos/{id}",
                    "delete_todo": "DELETE /api/todos/{id}",
                },
            },
        }

    return app


def run():
    import uvicorn
    settings = Settings()
    logger.info(f"Starting Bestodo API on {settings.HOST}:{settings.PORT}")
    uvicorn.run("bestodo.main:create_app", factory=True, host=settings.HOST, port=settings.PORT)


# Run the application
if __name__ == "__main__":
    run()
