"""Gemini の生レスポンスを HealthAnalysis に整形する

処理の流れ:
1. strip_code_fences: 前後の ``` / ```json を除去（テキスト処理のみ）
2. parse_analysis_response: JSON としてパース（失敗は ValueError）
3. sanitize_health_analysis: フィールドごとに型を矯正し、欠損値はデフォルトで補う

healthScore.score だけは必須項目で、欠損・非数値・範囲外なら全体を棄却する（None）。
それ以外の項目は棄却せずにデフォルト値へ置き換える。
"""
import json
import re
from typing import Any, Dict, List, Optional

from app.models.analysis import (
    DEFAULT_MEDICAL_ATTENTION,
    DEFAULT_SEVERITY,
    MEDICAL_ATTENTION_VALUES,
    SEVERITY_VALUES,
    HealthAnalysis,
)
from app.utils.coerce_utils import (
    as_object,
    is_number,
    pick_enum,
    to_number,
    to_text,
    to_text_list,
)

SCORE_MIN = 0
SCORE_MAX = 100

_LEADING_FENCE = re.compile(r"^```[\w-]*\s*")
_TRAILING_FENCE = re.compile(r"\s*```$")


class InvalidHealthScore(ValueError):
    pass


def strip_code_fences(text: str) -> str:
    """先頭・末尾のコードフェンスと空白を取り除く（冪等）"""
    cleaned = (text or "").strip()
    while True:
        stripped = _TRAILING_FENCE.sub("", _LEADING_FENCE.sub("", cleaned)).strip()
        if stripped == cleaned:
            return cleaned
        cleaned = stripped


def _reject_constant(name: str) -> Any:
    # NaN / Infinity / -Infinity は JSON ではない
    raise ValueError(f"non-standard JSON constant: {name}")


def parse_analysis_response(text: str) -> Any:
    """フェンス除去後のテキストを JSON としてパース"""
    return json.loads(strip_code_fences(text), parse_constant=_reject_constant)


def _health_score(raw: Any) -> Dict[str, Any]:
    hs = as_object(raw)
    score = hs.get("score")
    if not is_number(score) or not (SCORE_MIN <= score <= SCORE_MAX):
        raise InvalidHealthScore(f"invalid health score: {score!r}")

    interpretation = as_object(hs.get("interpretation"))
    bmi = as_object(hs.get("bmiAssessment"))
    return {
        "score": score,
        "interpretation": {
            "rating": to_number(interpretation.get("rating")),
            "message": to_text(interpretation.get("message")),
        },
        "bmiAssessment": {
            "bmiValue": to_number(bmi.get("bmiValue")),
            "category": to_text(bmi.get("category")),
            "healthImplications": to_text(bmi.get("healthImplications")),
        },
    }


def _potential_conditions(raw: Any) -> List[Dict[str, Any]]:
    if not isinstance(raw, list):
        return []
    out = []
    for item in raw:
        c = as_object(item)
        out.append({
            "name": to_text(c.get("name")),
            "probability": to_number(c.get("probability")),
            "severity": pick_enum(c.get("severity"), SEVERITY_VALUES, DEFAULT_SEVERITY),
            "medicalAttention": pick_enum(
                c.get("medicalAttention"), MEDICAL_ATTENTION_VALUES, DEFAULT_MEDICAL_ATTENTION
            ),
            "detailedAnalysis": to_text(c.get("detailedAnalysis")),
            "recommendedTests": to_text_list(c.get("recommendedTests")),
        })
    return out


def _lifestyle_modifications(raw: Any) -> List[Dict[str, Any]]:
    if not isinstance(raw, list):
        return []
    out = []
    for item in raw:
        m = as_object(item)
        plan = as_object(m.get("implementationPlan"))
        out.append({
            "activity": to_text(m.get("activity")),
            "impactFactor": to_number(m.get("impactFactor")),
            "targetConditions": to_text_list(m.get("targetConditions")),
            "implementationPlan": {
                "frequency": to_text(plan.get("frequency")),
                "duration": to_text(plan.get("duration")),
                "intensity": to_text(plan.get("intensity")),
                "precautions": to_text_list(plan.get("precautions")),
            },
        })
    return out


def _nutritional_recommendations(raw: Any) -> List[Dict[str, Any]]:
    if not isinstance(raw, list):
        return []
    out = []
    for item in raw:
        r = as_object(item)
        guide = as_object(r.get("servingGuidelines"))
        out.append({
            "food": to_text(r.get("food")),
            "benefits": to_text(r.get("benefits")),
            "targetSymptoms": to_text_list(r.get("targetSymptoms")),
            "servingGuidelines": {
                "amount": to_text(guide.get("amount")),
                "frequency": to_text(guide.get("frequency")),
                "bestTimeToConsume": to_text(guide.get("bestTimeToConsume")),
                "preparations": to_text_list(guide.get("preparations")),
            },
        })
    return out


def _health_summary(raw: Any) -> Dict[str, Any]:
    s = as_object(raw)
    return {
        "overallAssessment": to_text(s.get("overallAssessment")),
        "urgentConcerns": to_text_list(s.get("urgentConcerns")),
        "shortTermActions": to_text_list(s.get("shortTermActions")),
        "longTermStrategy": to_text(s.get("longTermStrategy")),
        "followUpRecommendations": to_text(s.get("followUpRecommendations")),
    }


def sanitize_health_analysis(data: Any) -> Optional[HealthAnalysis]:
    """パース済み JSON を HealthAnalysis に矯正。復元できない場合は None"""
    try:
        root = as_object(data)
        return HealthAnalysis.model_validate({
            "healthScore": _health_score(root.get("healthScore")),
            "potentialConditions": _potential_conditions(root.get("potentialConditions")),
            "lifestyleModifications": _lifestyle_modifications(root.get("lifestyleModifications")),
            "nutritionalRecommendations": _nutritional_recommendations(root.get("nutritionalRecommendations")),
            "healthSummary": _health_summary(root.get("healthSummary")),
        })
    except InvalidHealthScore as e:
        print(f"[WARN] health analysis rejected: {e}")
        return None
    except Exception as e:
        print(f"[ERROR] Sanitization error: {e!r}")
        return None
