from fastapi import APIRouter

router = APIRouter()

@router.get("/health")
def health():
    """ヘルスチェックエンドポイント"""
    return {"ok": True, "service": "healthpredict-api", "version": "1.0.0"}
