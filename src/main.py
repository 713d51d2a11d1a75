from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.config import get_settings
from src.routes.detect import router as detect_router
from src.routes.translate import router as translate_router

app = FastAPI()

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
    max_age=600,
)

app.include_router(detect_router)
app.include_router(translate_router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
