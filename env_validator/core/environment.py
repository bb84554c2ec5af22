"""
环境检查器

环境变量通过注入的只读 EnvironmentSource 查询，测试时可以替换为固定映射。
未设置或只含空白字符的变量都视为缺失。
"""

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class EnvironmentSource(Protocol):
    """Read-only view of environment variables."""

    def get(self, name: str) -> Optional[str]:
        ...


class ProcessEnvironment:
    """The real process environment, read at call time."""

    def get(self, name: str) -> Optional[str]:
        return os.environ.get(name)


class MappingEnvironment:
    """A fixed environment backed by a mapping."""

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self._values = dict(values or {})

    def get(self, name: str) -> Optional[str]:
        return self._values.get(name)


class VariableStatus(str, Enum):
    PRESENT = "present"
    BLANK = "blank"
    ABSENT = "absent"


@dataclass(frozen=True)
class VariableCheck:
    """单个变量的检查结果"""
    name: str
    status: VariableStatus

    @property
    def missing(self) -> bool:
        return self.status is not VariableStatus.PRESENT


def classify(value: Optional[str]) -> VariableStatus:
    if value is None:
        return VariableStatus.ABSENT
    if not value.strip():
        return VariableStatus.BLANK
    return VariableStatus.PRESENT


def check_environment(
    names: Iterable[str],
    environment: Optional[EnvironmentSource] = None,
) -> list[VariableCheck]:
    """对每个变量做一次即时读取，结果顺序与输入一致"""
    env = environment if environment is not None else ProcessEnvironment()
    checks: list[VariableCheck] = []
    for name in names:
        status = classify(env.get(name))
        logger.debug(f"{name}: {status.value}")
        checks.append(VariableCheck(name=name, status=status))
    return checks
