"""
忽略过滤器

从聚合结果中移除：
1. ignore_names 中的变量（精确匹配，区分大小写）
2. ignore_defaulted_vars 为真时，每次出现都带默认值的变量
"""

from collections.abc import Iterable

from env_validator.core.aggregator import AggregatedReferenceSet


def filter_references(
    aggregated: AggregatedReferenceSet,
    ignore_names: Iterable[str] = (),
    ignore_defaulted_vars: bool = False,
) -> list[str]:
    """
    计算待检查集合

    Returns:
        待检查的变量名，保持首次发现顺序
    """
    ignored = frozenset(ignore_names)
    to_check = [name for name in aggregated if name not in ignored]
    if ignore_defaulted_vars:
        to_check = [name for name in to_check if not aggregated.has_default(name)]
    return to_check
