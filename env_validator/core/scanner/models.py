"""
数据模型定义

包含扫描器使用的所有数据类。
"""

import json
from dataclasses import dataclass, field, asdict
from enum import Enum
from pathlib import Path
from typing import Optional


class Dialect(str, Enum):
    """Reference syntax a file is scanned with."""
    CONFIG = "config"
    CODE = "code"


@dataclass(frozen=True)
class VariableReference:
    """
    环境变量引用

    Attributes:
        name: 环境变量名称 ([A-Z0-9_]+)
        has_default: 引用是否带有默认值子句 (仅 ${VAR:default} 形式)
    """
    name: str
    has_default: bool = False


@dataclass(frozen=True)
class ScanTarget:
    """
    待扫描文件

    Attributes:
        path: 文件路径
        dialect: 按扩展名识别的方言，无法识别时为 None
    """
    path: Path
    dialect: Optional[Dialect] = None


@dataclass
class FileReferences:
    """References found in a single scanned file, in order of appearance."""
    path: str
    dialect: Dialect
    references: list[VariableReference] = field(default_factory=list)


@dataclass
class ScanResult:
    """
    扫描结果

    Attributes:
        files: 每个已扫描文件的引用，按遍历顺序排列
    """
    files: list[FileReferences] = field(default_factory=list)

    @property
    def references(self) -> list[VariableReference]:
        """All references across files in first-discovery order."""
        return [ref for f in self.files for ref in f.references]

    def to_json(self) -> str:
        """序列化为 JSON 字符串"""
        data = {
            "files": [
                {
                    "path": f.path,
                    "dialect": f.dialect.value,
                    "references": [asdict(ref) for ref in f.references],
                }
                for f in self.files
            ],
        }
        return json.dumps(data, ensure_ascii=False, indent=2)
