import httpx
from typing import Any, Dict, Optional, Protocol
from app.config import settings


class ContentGenerationError(RuntimeError):
    """Gemini 呼び出しの失敗（通信エラー・空レスポンスなど）"""


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str: ...


def extract_candidate_text(data: Dict[str, Any]) -> str:
    """generateContent レスポンスから最初の candidate のテキストを連結して取り出す"""
    candidates = data.get("candidates") or []
    if not candidates:
        reason = (data.get("promptFeedback") or {}).get("blockReason")
        if reason:
            raise ContentGenerationError(f"Gemini blocked the prompt: {reason}")
        raise ContentGenerationError("Gemini returned no candidates")

    parts = (candidates[0].get("content") or {}).get("parts") or []
    text = "".join(p.get("text", "") for p in parts if isinstance(p, dict))
    if not text.strip():
        raise ContentGenerationError("Gemini returned no text")
    return text.strip()


class GeminiClient:
    """Gemini generateContent REST API のクライアント

    リクエストごとに AsyncClient を開くので、インスタンスは並行リクエスト間で共有できる。
    """

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        api_base: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 60.0,
        temperature: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.temperature = temperature
        self._transport = transport

    @classmethod
    def from_settings(cls) -> "GeminiClient":
        return cls(
            api_key=settings.GEMINI_API_KEY,
            model=settings.GEMINI_MODEL,
            api_base=settings.GEMINI_API_BASE,
            timeout=settings.GEMINI_TIMEOUT,
            temperature=settings.GEMINI_TEMPERATURE,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.api_base}/models/{self.model}:generateContent"

    def build_body(self, prompt: str) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}]
        }
        if self.temperature is not None:
            body["generationConfig"] = {"temperature": float(self.temperature)}
        return body

    async def generate(self, prompt: str) -> str:
        """プロンプトを送信し、生成テキストを返す"""
        if not self.api_key:
            raise ContentGenerationError("GEMINI_API_KEY is not set")

        headers = {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json",
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                r = await client.post(self.endpoint, headers=headers, json=self.build_body(prompt))
                r.raise_for_status()
                data = r.json()
        except httpx.HTTPStatusError as e:
            raise ContentGenerationError(
                f"Gemini HTTP {e.response.status_code}: {e.response.text[:300]}"
            ) from e
        except httpx.HTTPError as e:
            raise ContentGenerationError(f"Gemini request failed: {e!r}") from e
        except ValueError as e:
            raise ContentGenerationError("Gemini returned a non-JSON body") from e

        return extract_candidate_text(data)
