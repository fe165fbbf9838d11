"""Vehicle class holding the odometer snapshot reminders are checked against."""

from typing import Optional


class Vehicle:
    """A fleet vehicle as returned by the backend. Read-only to the engine."""

    def __init__(
        self,
        id: str,
        current_mileage: float = 0,
        make: Optional[str] = None,
        model: Optional[str] = None,
        year: Optional[int] = None,
    ):
        self.id = id
        self.current_mileage = current_mileage or 0
        self.make = make
        self.model = model
        self.year = year

    @property
    def name(self) -> str:
        """Human-readable vehicle name, falls back to the id."""
        parts = [str(p) for p in (self.year, self.make, self.model) if p]
        return " ".join(parts) if parts else str(self.id)
