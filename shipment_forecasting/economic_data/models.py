"""
Data models for economic indicator series.
"""

from typing import Any, Dict, List
from dataclasses import dataclass, field


# Indicator name -> FRED series id
SERIES_IDS = {
    'gdp': 'GDP',
    'cpi': 'CPIAUCSL',
    'unemployment': 'UNRATE',
    'industrial_production': 'INDPRO',
    'retail_sales': 'RSXFS'
}

# FRED marks a missing observation with a single dot
MISSING_VALUE = "."


@dataclass(frozen=True)
class Observation:
    """A single dated indicator value."""
    date: str
    value: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Observation':
        """Create Observation from a raw FRED observation."""
        return cls(date=data['date'], value=float(data['value']))

    def to_dict(self) -> Dict[str, Any]:
        return {'date': self.date, 'value': self.value}


@dataclass
class IndicatorSeries:
    """Observations of one indicator, in FRED order (ascending date)."""
    indicator: str
    series_id: str
    observations: List[Observation] = field(default_factory=list)

    @property
    def values(self) -> List[float]:
        return [obs.value for obs in self.observations]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'indicator': self.indicator,
            'series_id': self.series_id,
            'data': [obs.to_dict() for obs in self.observations]
        }
