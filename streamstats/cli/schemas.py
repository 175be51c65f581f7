from typing import List
from pydantic import BaseModel

# One reported statistic; value is nan when nothing was ingested
class StatisticLine(BaseModel):
    label: str    # Statistic name, e.g. "min" or "pct90"
    value: float  # Final result of the accumulator

    model_config = {"extra": "forbid", "frozen": True}

    def render(self) -> str:
        return f"{self.label} = {self.value}"

# Output schema for a whole run
class Report(BaseModel):
    lines: List[StatisticLine]  # In accumulator construction order
    count: int                  # Number of values ingested

    model_config = {"extra": "forbid"}

    def render(self) -> str:
        return "".join(line.render() + "\n" for line in self.lines)
