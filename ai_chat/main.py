from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from ai_chat.api.ai import router as ai_router
from ai_chat.core.config import get_settings
from ai_chat.core.logger import get_logger
from ai_chat.services.gemini_service import GeminiService

logger = get_logger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.completion_provider = GeminiService(
        api_key=settings.gemini_api_key,
        model_name=settings.gemini_model,
    )
    logger.info(f"🔑 API Key configured: {bool(settings.gemini_api_key)}")
    yield


app = FastAPI(title="AI Chat Function", lifespan=lifespan)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(ai_router)


@app.get("/")
async def root():
    return {
        "message": "AI Chat Function - Gemini question answering",
        "endpoints": {
            "/api/AI": "GET/POST - ?question=...&format=html|json",
            "/health": "GET - Check API health",
        },
    }


@app.get("/health")
async def health(request: Request):
    provider = getattr(request.app.state, "completion_provider", None)
    return {
        "status": "healthy",
        "gemini_configured": bool(getattr(provider, "configured", False)),
        "model": settings.gemini_model,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)


# uvicorn ai_chat.main:app --reload --port 8000
# http://localhost:8000/api/AI?question=What is AI?&format=json
