"""
引用提取器

每种方言一个纯函数：输入文件文本，输出按出现顺序排列的 VariableReference 列表。
提取器不会失败，无法匹配的文本直接忽略。
"""

from typing import Callable

from env_validator.core.scanner.models import Dialect, VariableReference
from env_validator.core.scanner.patterns import TEMPLATE_PATTERN, LOOKUP_PATTERNS

Extractor = Callable[[str], list[VariableReference]]


def extract_template_refs(content: str) -> list[VariableReference]:
    """Extract ``${NAME}`` and ``${NAME:default}`` interpolations.

    Any default clause, even an empty one (``${NAME:}``), marks the
    reference as defaulted.
    """
    return [
        VariableReference(name=match.group(1), has_default=match.group(2) is not None)
        for match in TEMPLATE_PATTERN.finditer(content)
    ]


def extract_lookup_refs(content: str) -> list[VariableReference]:
    """Extract literal-string environment lookups from source code."""
    found: list[tuple[int, str]] = []
    for pattern, group_idx in LOOKUP_PATTERNS:
        for match in pattern.finditer(content):
            found.append((match.start(group_idx), match.group(group_idx)))
    found.sort()
    return [VariableReference(name=name) for _, name in found]


# 方言分发表：新增方言只需增加一项
EXTRACTORS: dict[Dialect, Extractor] = {
    Dialect.CONFIG: extract_template_refs,
    Dialect.CODE: extract_lookup_refs,
}


def extract_references(content: str, dialect: Dialect) -> list[VariableReference]:
    """按方言提取引用"""
    return EXTRACTORS[dialect](content)
