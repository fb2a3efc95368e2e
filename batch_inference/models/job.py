"""
Job input models.
"""
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..exceptions import UnrecognizedEnumValueError
from ..utils.decorators import handle_validation_errors
from ..utils.json import dumps


class JobInputType(str, Enum):
    """How a job input is materialized. Serialized by member name."""

    UriFolder = "UriFolder"  # everything under a URI prefix
    UriFile = "UriFile"

    @classmethod
    def names(cls) -> Tuple[str, ...]:
        """Member names in declaration order."""
        return tuple(member.name for member in cls)

    @classmethod
    def from_wire(cls, value: Any, parameter: Optional[str] = None) -> "JobInputType":
        """
        Parse the wire representation of a job input type.

        Matching is exact and case-sensitive on the member name. Ordinals,
        other casings and unknown names are rejected.

        Args:
            value: Raw value taken from a payload
            parameter: Payload field the value came from, for error reporting

        Returns:
            The matching JobInputType

        Raises:
            UnrecognizedEnumValueError: If value is not a declared name
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value in cls.__members__:
            return cls.__members__[value]
        raise UnrecognizedEnumValueError(
            cls.__name__, value, cls.names(), parameter=parameter
        )

    def to_wire(self) -> str:
        """Wire representation: the declared member name."""
        return self.name

    @classmethod
    def serialize(cls, value: Any) -> str:
        if not isinstance(value, cls):
            raise UnrecognizedEnumValueError(cls.__name__, value, cls.names())
        return value.to_wire()

    @classmethod
    def deserialize(cls, value: Any) -> "JobInputType":
        return cls.from_wire(value)

    def __str__(self) -> str:
        return self.name


class JobInput(BaseModel):
    """Input reference attached to a batch inference job."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, serialize_by_alias=True
    )

    job_input_type: JobInputType = Field(alias="jobInputType")
    uri: str
    mode: Optional[str] = None

    @field_validator("job_input_type", mode="before")
    @classmethod
    def _parse_job_input_type(cls, value: Any) -> JobInputType:
        return JobInputType.from_wire(value, parameter="jobInputType")

    @field_validator("uri")
    @classmethod
    def _check_uri(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("uri must not be empty")
        return value

    @property
    def is_folder(self) -> bool:
        return self.job_input_type is JobInputType.UriFolder

    @property
    def is_file(self) -> bool:
        return self.job_input_type is JobInputType.UriFile

    def to_json_dict(self) -> Dict[str, Any]:
        """
        Convert to a JSON-friendly dictionary keyed by wire names.
        The input type is emitted as its plain string name.
        """
        result = {
            "jobInputType": self.job_input_type.to_wire(),
            "uri": self.uri,
            "mode": self.mode,
        }

        # Remove None values
        return {k: v for k, v in result.items() if v is not None}

    def to_json(self, **kwargs) -> str:
        return dumps(self.to_json_dict(), **kwargs)

    @classmethod
    @handle_validation_errors
    def from_json_dict(cls, data: Dict[str, Any]) -> "JobInput":
        """
        Validate a job input payload.

        Raises:
            UnrecognizedEnumValueError: If jobInputType is not a declared name
            ValidationError: If any other field is missing or invalid
        """
        return cls.model_validate(data)

    @classmethod
    @handle_validation_errors
    def from_json(cls, text: str) -> "JobInput":
        """Validate a job input payload given as JSON text."""
        return cls.model_validate_json(text)
