# src/shahash/models/schema.py
from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field


class HashResult(BaseModel):
    """
    Finalized digest of a single file.
    """

    model_config = ConfigDict(frozen=True)

    path: str  # path as given by the caller
    name: str  # basename e.g. "ubuntu.iso"
    algorithm: str  # canonical name e.g. "sha256"
    hexdigest: str = Field(pattern=r"^[0-9a-f]+$")
    size: int = Field(ge=0)  # bytes consumed

    def line(self) -> str:
        """
        Render the one-line report: "<name> <algorithm>: <hexdigest>".
        """
        return f"{self.name} {self.algorithm}: {self.hexdigest}"
