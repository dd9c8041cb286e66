"""
ValidationResult — outcome of validating one extract() payload.
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ValidationResult:
    """Errors make a payload invalid; warnings are informational only."""

    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    entities_checked: int = 0
    data: Optional[dict] = None

    def summary(self) -> str:
        status = "valid" if self.valid else "invalid"
        return (
            f"{status}: {self.entities_checked} entities checked, "
            f"{len(self.errors)} error(s), {len(self.warnings)} warning(s)"
        )
