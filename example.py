#!/usr/bin/env python3

from batch_inference import (
    JobInput,
    JobInputType,
    UnrecognizedEnumValueError,
    display_job_inputs,
    print_validation_error,
)


def print_json(title, text):
    """Helper function to print a JSON payload"""
    print(f"\n=== {title} ===")
    print(text)
    print()


def main():
    inputs = [
        JobInput(
            job_input_type=JobInputType.UriFolder,
            uri="azureml://datastores/workspaceblobstore/paths/heart-disease/",
        ),
        JobInput(
            job_input_type=JobInputType.UriFile,
            uri="https://example.blob.core.windows.net/data/heart.csv",
            mode="Download",
        ),
    ]

    display_job_inputs(inputs)

    for job_input in inputs:
        print_json(f"{job_input.job_input_type} payload", job_input.to_json(indent=4))

    # Names are matched exactly, so this payload is rejected
    try:
        JobInput.from_json('{"jobInputType": "urifolder", "uri": "data/"}')
    except UnrecognizedEnumValueError as e:
        print_validation_error(e)


if __name__ == "__main__":
    main()
