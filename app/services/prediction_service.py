from typing import Any
from app.external.gemini_client import TextGenerator
from app.models.analysis import PredictionResult
from app.services.analysis_sanitizer import parse_analysis_response, sanitize_health_analysis
from app.services.prompt_service import build_health_analysis_prompt

GENERATION_FAILED = "Failed to generate health analysis"
PARSE_FAILED = "Failed to parse health analysis response"
INVALID_STRUCTURE = "Invalid health analysis data structure"


async def predict_disease_with_ai(
    generator: TextGenerator,
    medical_history: Any = None,
    personal_data: Any = None,
    lifestyle_factors: Any = None,
) -> PredictionResult:
    """健康リスク分析を生成し、検証済みの結果か失敗理由を返す"""
    prompt = build_health_analysis_prompt(medical_history, personal_data, lifestyle_factors)

    try:
        generated_text = await generator.generate(prompt)
    except Exception as e:
        print(f"[ERROR] Error generating content: {e!r}")
        return PredictionResult(success=False, error=GENERATION_FAILED)

    try:
        data = parse_analysis_response(generated_text)
    except (ValueError, TypeError, RecursionError) as e:
        excerpt = (generated_text or "")[:200].replace("\n", " ")
        print(f"[ERROR] Error parsing JSON: {e} (raw: {excerpt!r})")
        return PredictionResult(success=False, error=PARSE_FAILED)

    analysis = sanitize_health_analysis(data)
    if analysis is None:
        return PredictionResult(success=False, error=INVALID_STRUCTURE)
    return PredictionResult(success=True, analysis=analysis)
