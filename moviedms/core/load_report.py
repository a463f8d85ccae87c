"""Load Report — outcome of a bulk CSV load.

Invariants:
    - Same shape for every outcome (success, bad rows, missing file)
    - errors keeps the order in which problems were found

Design Decisions:
    - Mutable dataclass: the loader accumulates into it row by row
"""

from dataclasses import dataclass, field


@dataclass
class LoadReport:
    """Loaded row count plus ordered per-line error messages."""
    loaded: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def summary(self) -> str:
        return f"Loaded={self.loaded}, Errors={len(self.errors)}"

    def __str__(self) -> str:
        if not self.errors:
            return self.summary()
        return f"{self.summary()} {' | '.join(self.errors)}"
