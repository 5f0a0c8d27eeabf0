import codecs
from pathlib import Path
from typing import Union
from pydantic import BaseModel, ConfigDict, Field, field_validator


class InspectCodeIssuesSettings(BaseModel):
    """Content of an InspectCode report together with its text encoding"""
    model_config = ConfigDict(frozen=True)

    log_file_content: bytes = Field(description="Raw bytes of the report")
    encoding: str = Field("utf-8", description="Text encoding of the report")

    @field_validator('encoding')
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown encoding '{v}'")
        return v

    @classmethod
    def from_content(cls, content: bytes, encoding: str = "utf-8") -> "InspectCodeIssuesSettings":
        """Settings for a report already held in memory"""
        return cls(log_file_content=content, encoding=encoding)

    @classmethod
    def from_file_path(cls, file_path: Union[str, Path],
                       encoding: str = "utf-8") -> "InspectCodeIssuesSettings":
        """Settings for a report stored on disk"""
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"InspectCode report not found: {path}")

        return cls(log_file_content=path.read_bytes(), encoding=encoding)
