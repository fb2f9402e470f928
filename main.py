# main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.routers import health, prediction, debug

app = FastAPI(
    title="HealthPredict API",
    description="AI-assisted health risk analysis with validated Gemini output",
    version="1.0.0"
)

# CORS設定
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ルーター登録
app.include_router(health.router)
app.include_router(prediction.router, prefix="/analysis")
app.include_router(debug.router, prefix="/debug")

@app.get("/")
def root():
    """ルートエンドポイント"""
    return {
        "message": "HealthPredict API v1.0",
        "services": ["analysis"],
        "status": "healthy"
    }
