"""Outcome Catalog - Business Logic Layer (SoC)"""
import json
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from classboard.config.outcome_table import OUTCOME_TABLE, STATUS_FALLBACKS
from classboard.config.settings import CATEGORY_ALIASES, EVENT_CATEGORIES
from classboard.exceptions.exceptions import MalformedRecord, UnknownOutcome
from classboard.models.board_models import OutcomeRule


class OutcomeCatalog:
    """Read-only lookup from (category, outcome label) to point deltas.

    Built once from a static table and never mutated afterwards, so a single
    instance can be shared by every concurrent aggregation.
    """

    def __init__(self, table: Mapping[str, Mapping[str, Tuple[int, int]]],
                 fallbacks: Optional[Mapping[str, Mapping[str, str]]] = None):
        rules: Dict[str, Mapping[str, OutcomeRule]] = {}
        for category, outcomes in table.items():
            if category not in EVENT_CATEGORIES:
                raise ValueError(f"Unsupported event category in outcome table: {category}")
            rules[category] = MappingProxyType({
                label: OutcomeRule(category, label, int(points[0]), int(points[1]))
                for label, points in outcomes.items()
            })
        self._rules = MappingProxyType(rules)

        resolved: Dict[str, Mapping[str, OutcomeRule]] = {}
        for category, by_status in (fallbacks or {}).items():
            if category not in self._rules:
                raise ValueError(f"Fallback defined for unknown category: {category}")
            per_status = {}
            for status, label in by_status.items():
                if label not in self._rules[category]:
                    raise ValueError(f"Fallback '{label}' is not an outcome of {category}")
                per_status[status] = self._rules[category][label]
            resolved[category] = MappingProxyType(per_status)
        self._fallbacks = MappingProxyType(resolved)

    @classmethod
    def from_json_file(cls, path: str) -> "OutcomeCatalog":
        """Load a catalog from a JSON file shaped like the in-code table:
        ``{"outcomes": {category: {label: [student, class]}}, "fallbacks": {...}}``
        """
        with open(path, "r", encoding="utf-8") as handle:
            data = json.load(handle)
        return cls(data.get("outcomes", {}), data.get("fallbacks"))

    def normalize_category(self, category: str) -> str:
        normalized = CATEGORY_ALIASES.get(category, category)
        if normalized not in self._rules:
            raise MalformedRecord(f"Unknown event category: {category}")
        return normalized

    def rule(self, category: str, label: str) -> OutcomeRule:
        outcomes = self._rules.get(CATEGORY_ALIASES.get(category, category))
        if outcomes is None or label not in outcomes:
            raise UnknownOutcome(category, label)
        return outcomes[label]

    def lookup(self, category: str, label: str) -> Tuple[int, int]:
        """Return (student points, class points) or raise UnknownOutcome"""
        rule = self.rule(category, label)
        return rule.student_points, rule.class_points

    def fallback(self, category: str, status: str) -> Optional[Tuple[int, int]]:
        """Points for a record that carries a status but no outcome label"""
        rule = self._fallbacks.get(CATEGORY_ALIASES.get(category, category), {}).get(status)
        if rule is None:
            return None
        return rule.student_points, rule.class_points

    def categories(self) -> List[str]:
        return list(self._rules.keys())

    def rules(self, category: str) -> List[OutcomeRule]:
        return list(self._rules[self.normalize_category(category)].values())

    def to_dict(self) -> Dict[str, List[Dict]]:
        return {
            category: [
                {"label": r.label, "studentPoints": r.student_points, "classPoints": r.class_points}
                for r in outcomes.values()
            ]
            for category, outcomes in self._rules.items()
        }


DEFAULT_CATALOG = OutcomeCatalog(OUTCOME_TABLE, STATUS_FALLBACKS)
