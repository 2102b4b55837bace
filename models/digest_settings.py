"""
Runtime settings for digestkit hosts, built from the [digest] config section.
"""
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from models.encoding_kind import EncodingKind


class DigestSettings(BaseModel):
    """
    Validated digest settings.

    Attributes:
        default_encoding (EncodingKind): Encoding used when a host does not pick one.
        lock_timeout (Optional[float]): Seconds to wait for a session lock; None blocks.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra='forbid'
    )

    default_encoding: EncodingKind = Field(EncodingKind.HEX, description="Encoding used when none is given")
    lock_timeout: Optional[float] = Field(None, gt=0, description="Session lock timeout in seconds")
