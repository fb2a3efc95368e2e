"""
JSON helpers that keep enums in their named wire form.
"""
import json
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel


def convert_to_json_friendly(obj: Any) -> Any:
    """
    Recursively convert an object into JSON-friendly primitives.

    Enum members become their value (for JobInputType, the member name),
    pydantic models become their wire dict, Decimals become strings.
    """
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, BaseModel):
        if hasattr(obj, "to_json_dict"):
            return convert_to_json_friendly(obj.to_json_dict())
        return convert_to_json_friendly(obj.model_dump(by_alias=True, exclude_none=True))
    if isinstance(obj, Decimal):
        return str(obj)
    if isinstance(obj, dict):
        return {k: convert_to_json_friendly(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [convert_to_json_friendly(item) for item in obj]
    return obj


class BatchInferenceJSONEncoder(json.JSONEncoder):
    """JSON encoder for job payloads."""

    def default(self, obj):
        if isinstance(obj, (Enum, BaseModel, Decimal)):
            return convert_to_json_friendly(obj)
        return super().default(obj)


def dumps(obj: Any, **kwargs) -> str:
    kwargs.setdefault("cls", BatchInferenceJSONEncoder)
    return json.dumps(convert_to_json_friendly(obj), **kwargs)
