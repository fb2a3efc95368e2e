import pytest

from batch_inference.models.job import JobInput, JobInputType


@pytest.fixture
def folder_input():
    """Folder input as it appears on a batch job"""
    return JobInput(
        job_input_type=JobInputType.UriFolder,
        uri="azureml://datastores/workspaceblobstore/paths/heart-disease/",
        mode="ReadOnlyMount",
    )


@pytest.fixture
def file_input():
    """Single file input without a mode"""
    return JobInput(
        job_input_type=JobInputType.UriFile,
        uri="https://example.blob.core.windows.net/data/heart.csv",
    )


@pytest.fixture
def folder_payload():
    """Wire payload for a folder input"""
    return {
        "jobInputType": "UriFolder",
        "uri": "azureml://datastores/workspaceblobstore/paths/heart-disease/",
        "mode": "ReadOnlyMount",
    }
