import json
import math
from typing import Any, Dict, List, Sequence


def as_object(value: Any) -> Dict[str, Any]:
    """dict 以外（None, 文字列, 配列など）は空 dict として扱う"""
    return value if isinstance(value, dict) else {}


def is_number(value: Any) -> bool:
    """JSON の数値かどうか（bool と NaN/inf は除外）"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        # float に収まらない巨大な整数
        return False


def to_number(value: Any, default: float = 0) -> float:
    """数値へ変換。数値として解釈できない場合は default"""
    if is_number(value):
        return value
    if isinstance(value, str):
        try:
            parsed = float(value.strip())
        except ValueError:
            return default
        return parsed if math.isfinite(parsed) else default
    return default


def to_text(value: Any) -> str:
    """文字列へ変換。None は空文字"""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def to_text_list(value: Any) -> List[str]:
    """配列なら各要素を文字列化、配列以外は空リスト"""
    if not isinstance(value, list):
        return []
    return [to_text(v) for v in value]


def pick_enum(value: Any, allowed: Sequence[str], default: str) -> str:
    # 完全一致のみ（大文字小文字や型違いは default）
    if isinstance(value, str) and value in allowed:
        return value
    return default
