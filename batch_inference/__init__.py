"""Batch Inference Contracts Package"""

from .models.job import JobInput, JobInputType
from .exceptions import BatchInferenceError, ValidationError, UnrecognizedEnumValueError
from .utils.display import build_job_inputs_table, display_job_inputs, print_validation_error

__version__ = "0.1.0"
__all__ = [
    "JobInput",
    "JobInputType",
    "BatchInferenceError",
    "ValidationError",
    "UnrecognizedEnumValueError",
    "build_job_inputs_table",
    "display_job_inputs",
    "print_validation_error",
]
