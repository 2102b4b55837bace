"""
DigestRecord model, describing a digest produced by a HashSession.
"""
from pydantic import BaseModel, Field, ConfigDict

from models.algorithm_kind import HashAlgorithmKind


class DigestRecord(BaseModel):
    """
    A rendered digest together with what produced it.

    Attributes:
        algorithm (HashAlgorithmKind): Algorithm the session was built on.
        encoding (str): Canonical name of the encoding used to render the digest.
        digest (str): The rendered digest.
        digest_size (int): Length of the raw digest in bytes.
        chunks (int): Number of chunks fed to the session before the digest.
        bytes_hashed (int): Total number of input bytes.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra='forbid',
        use_enum_values=True
    )

    algorithm: HashAlgorithmKind = Field(..., description="Algorithm the session was built on")
    encoding: str = Field(..., pattern=r"^(utf8|base64|hex)$", description="Encoding name")
    digest: str = Field(..., description="Rendered digest")
    digest_size: int = Field(..., gt=0, description="Raw digest length in bytes")
    chunks: int = Field(0, ge=0, description="Number of chunks hashed")
    bytes_hashed: int = Field(0, ge=0, description="Total number of input bytes")

    def to_display_dict(self) -> dict:
        """Return the record as a plain dict for table or JSON output."""
        return self.model_dump()
