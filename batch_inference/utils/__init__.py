from .decorators import handle_validation_errors
from .json import BatchInferenceJSONEncoder, convert_to_json_friendly, dumps

__all__ = [
    "BatchInferenceJSONEncoder",
    "convert_to_json_friendly",
    "dumps",
    "handle_validation_errors",
]
