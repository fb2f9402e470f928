"""
Pytest configuration and fixtures
"""
import copy
import json

import pytest


class ScriptedGenerator:
    """Fake text generator returning a scripted response (or raising)"""

    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.prompts = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


VALID_ANALYSIS = {
    "healthScore": {
        "score": 72,
        "interpretation": {"rating": 0.72, "message": "Kondisi kesehatan cukup baik"},
        "bmiAssessment": {
            "bmiValue": 24.5,
            "category": "Normal",
            "healthImplications": "Berat badan dalam batas normal",
        },
    },
    "potentialConditions": [
        {
            "name": "Hipertensi",
            "probability": 0.6,
            "severity": "high",
            "medicalAttention": "consult",
            "detailedAnalysis": "Tekanan darah cenderung tinggi",
            "recommendedTests": ["Cek tekanan darah", "Tes kolesterol"],
        },
        {
            "name": "Diabetes tipe 2",
            "probability": 0.4,
            "severity": "medium",
            "medicalAttention": "monitoring",
            "detailedAnalysis": "Riwayat keluarga diabetes",
            "recommendedTests": ["HbA1c"],
        },
        {
            "name": "Anemia",
            "probability": 0.2,
            "severity": "low",
            "medicalAttention": "immediate",
            "detailedAnalysis": "Sering merasa lelah",
            "recommendedTests": [],
        },
    ],
    "lifestyleModifications": [
        {
            "activity": "Jalan cepat",
            "impactFactor": 0.8,
            "targetConditions": ["Hipertensi"],
            "implementationPlan": {
                "frequency": "5 kali seminggu",
                "duration": "30 menit",
                "intensity": "Sedang",
                "precautions": ["Minum air yang cukup"],
            },
        },
    ],
    "nutritionalRecommendations": [
        {
            "food": "Tempe",
            "benefits": "Sumber protein nabati",
            "targetSymptoms": ["Kelelahan"],
            "servingGuidelines": {
                "amount": "2 potong",
                "frequency": "Setiap hari",
                "bestTimeToConsume": "Makan siang",
                "preparations": ["Dikukus", "Ditumis"],
            },
        },
    ],
    "healthSummary": {
        "overallAssessment": "Secara umum sehat",
        "urgentConcerns": ["Tekanan darah"],
        "shortTermActions": ["Kurangi garam"],
        "longTermStrategy": "Olahraga teratur",
        "followUpRecommendations": "Kontrol 3 bulan lagi",
    },
}


@pytest.fixture
def valid_analysis():
    """A deep copy of a well-formed analysis payload"""
    return copy.deepcopy(VALID_ANALYSIS)


@pytest.fixture
def valid_analysis_text(valid_analysis):
    return json.dumps(valid_analysis, ensure_ascii=False)


@pytest.fixture
def scripted_generator():
    """Factory for ScriptedGenerator"""
    return ScriptedGenerator


@pytest.fixture(autouse=True)
def _no_api_token(monkeypatch):
    # tests never depend on the caller's environment
    from app.config import settings
    monkeypatch.setattr(settings, "UI_API_TOKEN", "")
