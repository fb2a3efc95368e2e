from .job import JobInput, JobInputType

__all__ = [
    "JobInput",
    "JobInputType",
]
