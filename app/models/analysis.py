from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Any, List, Literal, Optional, Union

Severity = Literal["low", "medium", "high"]
MedicalAttention = Literal["monitoring", "consult", "immediate"]

SEVERITY_VALUES = ("low", "medium", "high")
MEDICAL_ATTENTION_VALUES = ("monitoring", "consult", "immediate")
DEFAULT_SEVERITY: Severity = "medium"
DEFAULT_MEDICAL_ATTENTION: MedicalAttention = "monitoring"


class CamelModel(BaseModel):
    # JSON キーは camelCase（healthScore, bmiValue など）
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # Pydantic v2 対応
    def dict(self):
        """Pydantic v1互換のdict()メソッド（camelCaseキー）"""
        return self.model_dump(by_alias=True)


class Interpretation(CamelModel):
    rating: Union[int, float]
    message: str


class BmiAssessment(CamelModel):
    bmi_value: Union[int, float]
    category: str
    health_implications: str


class HealthScore(CamelModel):
    score: Union[int, float]      # 0〜100
    interpretation: Interpretation
    bmi_assessment: BmiAssessment


class PotentialCondition(CamelModel):
    name: str
    probability: Union[int, float]  # 0〜1
    severity: Severity
    medical_attention: MedicalAttention
    detailed_analysis: str
    recommended_tests: List[str]


class ImplementationPlan(CamelModel):
    frequency: str
    duration: str
    intensity: str
    precautions: List[str]


class LifestyleModification(CamelModel):
    activity: str
    impact_factor: Union[int, float]  # 0〜1
    target_conditions: List[str]
    implementation_plan: ImplementationPlan


class ServingGuidelines(CamelModel):
    amount: str
    frequency: str
    best_time_to_consume: str
    preparations: List[str]


class NutritionalRecommendation(CamelModel):
    food: str
    benefits: str
    target_symptoms: List[str]
    serving_guidelines: ServingGuidelines


class HealthSummary(CamelModel):
    overall_assessment: str
    urgent_concerns: List[str]
    short_term_actions: List[str]
    long_term_strategy: str
    follow_up_recommendations: str


class HealthAnalysis(CamelModel):
    health_score: HealthScore
    potential_conditions: List[PotentialCondition]
    lifestyle_modifications: List[LifestyleModification]
    nutritional_recommendations: List[NutritionalRecommendation]
    health_summary: HealthSummary


class PredictionResult(BaseModel):
    success: bool
    analysis: Optional[HealthAnalysis] = None
    error: Optional[str] = None

    def dict(self):
        """レスポンス用 dict（存在しないキーは出力しない）"""
        return self.model_dump(by_alias=True, exclude_none=True)


class PredictionRequest(CamelModel):
    # 各ペイロードは中身を解釈せずにプロンプトへ埋め込む
    medical_history: Optional[Any] = None
    personal_data: Optional[Any] = None
    lifestyle_factors: Optional[Any] = None
