"""Value objects shared by the builder, the state container and the view."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from admin_dashboard.errors import DataShapeMismatch

Count = Union[int, float]


@dataclass(frozen=True)
class ChartModel:
    """Contest labels and their submission counts, index-aligned."""

    categories: tuple[str, ...] = ()
    series: tuple[Count, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "categories", tuple(self.categories))
        object.__setattr__(self, "series", tuple(self.series))
        if len(self.categories) != len(self.series):
            raise DataShapeMismatch(len(self.categories), len(self.series))

    @property
    def is_empty(self) -> bool:
        return not self.series


@dataclass(frozen=True)
class AggregateTotals:
    users: Count = 0
    contests: int = 0
    submissions: Count = 0

    def as_dict(self) -> dict[str, Count]:
        return {"users": self.users, "contests": self.contests, "submissions": self.submissions}


@dataclass(frozen=True)
class ViewState:
    """Everything the admin view displays, replaced as a whole on each successful fetch."""

    totals: AggregateTotals = field(default_factory=AggregateTotals)
    chart: ChartModel = field(default_factory=ChartModel)

    @classmethod
    def empty(cls) -> "ViewState":
        return cls()
