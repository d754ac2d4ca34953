from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from entityview import __version__
from entityview.settings import settings

app = FastAPI(
    title="EntityView API",
    version=__version__,
    description="Reference read endpoint for the entities admin listing.",
)

# --- CORS ----------------------------------------------------------
# Dev-only: local front ends on the usual ports.
origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)

# --- Include Routers ----------------------------------------------------------
from .entities import router as entities_router

app.include_router(entities_router)


# ---------- health-check ----------
@app.get("/")
def root():
    return {"status": "ok", "msg": "EntityView API is alive"}


def serve() -> None:
    """Run the reference API with uvicorn using the configured host/port."""
    import uvicorn

    uvicorn.run("api.main:app", host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    serve()
