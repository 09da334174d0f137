"""FastAPI main application."""
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from squadfeed.connector import SessionConnector
from squadfeed.routes import killfeed, roster
from squadfeed.session import GameSession
from squadfeed.settings import Settings, settings as default_settings
from squadfeed.store import WoundLog


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create the API with its own session state.
    
    The wound log, roster and upstream connector live on app.state for the
    lifetime of the app; nothing is persisted.
    """
    app_settings = app_settings or default_settings
    session = GameSession()
    wound_log = WoundLog()
    connector = SessionConnector(session, wound_log, app_settings)
    
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        print(f"[API] Squad session API running on port {app_settings.PORT}")
        print(f"[API] Routes: players={app_settings.PLAYERS_PATH} leaders={app_settings.LEADERS_PATH} killfeed={app_settings.KILLFEED_PATH}")
        await connector.connect()
        yield
        await connector.disconnect()
    
    app = FastAPI(
        title="Squad Session API",
        description="Read-only roster, squad leader and killfeed snapshot of a live game session",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.session = session
    app.state.wound_log = wound_log
    app.state.connector = connector
    
    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=app_settings.cors_methods_list,
        allow_headers=["*"],
        max_age=app_settings.CORS_MAX_AGE,
    )

    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        """Send the CORS headers on every response, not only cross-origin ones."""
        response = await call_next(request)
        origin = request.headers.get("origin")
        if "*" in app_settings.cors_origins_list:
            response.headers.setdefault("Access-Control-Allow-Origin", "*")
        elif origin in app_settings.cors_origins_list:
            response.headers.setdefault("Access-Control-Allow-Origin", origin)
        response.headers.setdefault("Access-Control-Allow-Methods", ",".join(app_settings.cors_methods_list))
        response.headers.setdefault("Access-Control-Max-Age", str(app_settings.CORS_MAX_AGE))
        return response

    # Include routers
    app.include_router(roster.create_router(app_settings.PLAYERS_PATH, app_settings.LEADERS_PATH))
    app.include_router(killfeed.create_router(app_settings.KILLFEED_PATH))
    
    @app.get("/")
    async def root():
        """Root endpoint."""
        return {"message": "Squad Session API", "docs": "/docs"}
    
    @app.get("/health")
    async def health():
        """Health check."""
        return {"status": "ok"}
    
    return app


app = create_app()


def run():
    """Serve the API on the configured host and port."""
    import uvicorn
    
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)


if __name__ == "__main__":
    run()
