"""Structural anomalies reported by the format parser."""
from typing import Iterable, List, Tuple


class AnomalyList:
    """Ordered ``(identifier, description)`` pairs."""

    def __init__(self):
        self._anomalies: List[Tuple[str, str]] = []

    def set_anomalies(self, anomalies: Iterable[Tuple[str, str]]) -> None:
        self._anomalies = [(str(ident), str(desc)) for ident, desc in anomalies]

    def get_number_of_anomalies(self) -> int:
        return len(self._anomalies)

    def get_identifier(self, position: int) -> str:
        return self._anomalies[position][0]

    def get_description(self, position: int) -> str:
        return self._anomalies[position][1]

    def __len__(self):
        return len(self._anomalies)
