import json
from typing import Any
from pydantic import BaseModel

# 出力言語・件数はプロンプト側の約束で、呼び出し側からは変更できない
RESPONSE_LANGUAGE = "Bahasa Indonesia"
POTENTIAL_CONDITIONS_COUNT = 3
LIFESTYLE_MODIFICATIONS_COUNT = 3
NUTRITIONAL_RECOMMENDATIONS_COUNT = 6


def render_payload(payload: Any) -> str:
    """入力ペイロードをプロンプト埋め込み用の文字列にする（None は空文字）"""
    if payload is None:
        return ""
    if isinstance(payload, str):
        return payload
    if isinstance(payload, BaseModel):
        return payload.model_dump_json()
    return json.dumps(payload, ensure_ascii=False, default=str)


def build_health_analysis_prompt(medical_history: Any = None, personal_data: Any = None, lifestyle_factors: Any = None) -> str:
    """健康リスク分析用プロンプトを生成"""
    context_block = "".join(
        f"  {block}\n" for block in (
            render_payload(medical_history),
            render_payload(personal_data),
            render_payload(lifestyle_factors),
        ) if block
    )

    return f"""You are a medical analysis system that MUST ONLY respond with a valid JSON object. DO NOT include any explanations, comments, or additional text outside the JSON structure.

IMPORTANT RESPONSE RULES:
- Return ONLY the JSON object
- DO NOT use markdown code blocks
- DO NOT add explanations before or after the JSON
- DO NOT include the word "json" or any other text
- ALL responses MUST be in {RESPONSE_LANGUAGE}
- Use Indonesian medical terms and descriptions
- Ensure all JSON values are properly formatted and enclosed in quotes when needed
- You MUST provide EXACTLY {POTENTIAL_CONDITIONS_COUNT} items in potentialConditions array
- You MUST provide EXACTLY {LIFESTYLE_MODIFICATIONS_COUNT} items in lifestyleModifications array
- You MUST provide EXACTLY {NUTRITIONAL_RECOMMENDATIONS_COUNT} items in nutritionalRecommendations array

Analyze this health data and return a single JSON object:

{{
{context_block}}}

Required response structure (MUST FOLLOW EXACTLY):
{{
  "healthScore": {{
    "score": <number 0-100>,
    "interpretation": {{
      "rating": <number 0-1>,
      "message": <string>
    }},
    "bmiAssessment": {{
      "bmiValue": <number>,
      "category": <string>,
      "healthImplications": <string>
    }}
  }},
  "potentialConditions": [
    // EXACTLY {POTENTIAL_CONDITIONS_COUNT} ITEMS REQUIRED
    {{
      "name": <string>,
      "probability": <number 0-1>,
      "severity": <"low" | "medium" | "high">,
      "medicalAttention": <"monitoring" | "consult" | "immediate">,
      "detailedAnalysis": <string>,
      "recommendedTests": [<string array>]
    }}
  ],
  "lifestyleModifications": [
    // EXACTLY {LIFESTYLE_MODIFICATIONS_COUNT} ITEMS REQUIRED
    {{
      "activity": <string>,
      "impactFactor": <number 0-1>,
      "targetConditions": [<string array>],
      "implementationPlan": {{
        "frequency": <string>,
        "duration": <string>,
        "intensity": <string>,
        "precautions": [<string array>]
      }}
    }}
  ],
  "nutritionalRecommendations": [
    // EXACTLY {NUTRITIONAL_RECOMMENDATIONS_COUNT} ITEMS REQUIRED
    {{
      "food": <string>,
      "benefits": <string>,
      "targetSymptoms": [<string array>],
      "servingGuidelines": {{
        "amount": <string>,
        "frequency": <string>,
        "bestTimeToConsume": <string>,
        "preparations": [<string array>]
      }}
    }}
  ],
  "healthSummary": {{
    "overallAssessment": <string>,
    "urgentConcerns": [<string array>],
    "shortTermActions": [<string array>],
    "longTermStrategy": <string>,
    "followUpRecommendations": <string>
  }}
}}

STRICT REQUIREMENTS:
1. potentialConditions MUST contain EXACTLY {POTENTIAL_CONDITIONS_COUNT} different conditions, ordered by probability (highest first)
2. lifestyleModifications MUST contain EXACTLY {LIFESTYLE_MODIFICATIONS_COUNT} different activities, ordered by impactFactor (highest first)
3. nutritionalRecommendations MUST contain EXACTLY {NUTRITIONAL_RECOMMENDATIONS_COUNT} different food recommendations, ordered as follows:
   - First 2: High-protein foods for malnutrition
   - Next 2: Vitamin and mineral-rich foods for immune support
   - Last 2: Foods that help with symptom management
4. Include Indonesian context and locally available foods
5. Use Indonesian medical terminology and culturally appropriate recommendations
6. Consider local Indonesian healthcare access and resources
7. Base all predictions on provided symptoms and data
8. Ensure all number values are actual numbers, not strings
9. Arrays must be properly formatted with square brackets
10. All string values must be enclosed in double quotes
11. Severity levels must be exactly "low", "medium", or "high"
12. Medical attention levels must be exactly "monitoring", "consult", or "immediate"
"""
