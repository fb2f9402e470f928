from fastapi import APIRouter, Depends, Header
from fastapi.responses import JSONResponse
from app.external.gemini_client import GeminiClient, TextGenerator
from app.models.analysis import PredictionRequest
from app.services.prediction_service import predict_disease_with_ai
from app.utils.auth_utils import require_token

router = APIRouter(tags=["analysis"])

def get_generator() -> TextGenerator:
    """生成サービスのクライアント（テストでは dependency_overrides で差し替え）"""
    return GeminiClient.from_settings()

@router.post("/predict")
async def predict(
    body: PredictionRequest,
    x_api_token: str | None = Header(default=None),
    generator: TextGenerator = Depends(get_generator),
):
    """健康リスク分析"""
    require_token(x_api_token)
    result = await predict_disease_with_ai(
        generator,
        medical_history=body.medical_history,
        personal_data=body.personal_data,
        lifestyle_factors=body.lifestyle_factors,
    )
    return JSONResponse(result.dict(), status_code=200 if result.success else 502)
