"""
引用聚合

把所有文件的引用合并为一个去重的集合：变量名 -> 是否每次出现都带默认值。
同一个变量只要有一次出现没有默认值，聚合结果就是“没有默认值”。
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from env_validator.core.scanner.models import VariableReference


@dataclass
class AggregatedReferenceSet:
    """
    Deduplicated references keyed by variable name.

    ``defaults[name]`` is True only when every occurrence of ``name``
    carried a default value. Iteration follows first-discovery order.
    """
    defaults: dict[str, bool] = field(default_factory=dict)

    def add(self, reference: VariableReference) -> None:
        previous = self.defaults.get(reference.name, True)
        self.defaults[reference.name] = previous and reference.has_default

    def names(self) -> list[str]:
        return list(self.defaults)

    def has_default(self, name: str) -> bool:
        return self.defaults[name]

    def __contains__(self, name: object) -> bool:
        return name in self.defaults

    def __len__(self) -> int:
        return len(self.defaults)

    def __iter__(self):
        return iter(self.defaults)


def aggregate_references(references: Iterable[VariableReference]) -> AggregatedReferenceSet:
    """Fold references into one set, AND-ing ``has_default`` per name."""
    aggregated = AggregatedReferenceSet()
    for reference in references:
        aggregated.add(reference)
    return aggregated
