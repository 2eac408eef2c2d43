"""Rename operation data models."""

from enum import Enum

from pydantic import BaseModel, Field


class RenameOp(BaseModel):
    """A single file rename operation."""

    source: str = Field(description="Original file name (without directory path)")
    target: str = Field(description="New file name (without directory path)")

    def __str__(self) -> str:
        return f"RenameOp('{self.source}' -> '{self.target}')"


class RenameOutcome(str, Enum):
    """How a rename batch ended."""

    RENAMED = "renamed"
    DECLINED = "declined"


class RenameReport(BaseModel):
    """Result of running a rename batch."""

    outcome: RenameOutcome = Field(description="Whether the renames were applied or declined by the user")
    operations: list[RenameOp] = Field(
        description="Rename operations that were performed, in order",
        default_factory=list,
    )

    def __len__(self) -> int:
        return len(self.operations)
