from fastapi import APIRouter, Header
from app.config import settings
from app.models.analysis import PredictionRequest
from app.services.prompt_service import build_health_analysis_prompt
from app.utils.auth_utils import require_token

router = APIRouter(tags=["debug"])

@router.get("/env")
def debug_env():
    """環境変数確認"""
    return {
        "has_GEMINI_API_KEY": bool(settings.GEMINI_API_KEY),
        "GEMINI_MODEL": settings.GEMINI_MODEL,
        "GEMINI_TIMEOUT": settings.GEMINI_TIMEOUT,
        "token_required": bool(settings.UI_API_TOKEN),
    }

@router.post("/prompt")
def debug_prompt(body: PredictionRequest, x_api_token: str | None = Header(default=None)):
    """Gemini を呼ばずに生成されるプロンプトを確認"""
    require_token(x_api_token)
    prompt = build_health_analysis_prompt(body.medical_history, body.personal_data, body.lifestyle_factors)
    return {"chars": len(prompt), "prompt": prompt}
