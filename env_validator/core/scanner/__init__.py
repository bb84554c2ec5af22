"""
Scanner 模块 - 扫描项目文件提取环境变量引用

模块化结构：
- models.py: 数据类定义
- patterns.py: 正则表达式模式和扩展名映射
- extractors.py: 按方言分发的提取器
- core.py: 文件遍历和主扫描函数
"""

from env_validator.core.scanner.models import (
    Dialect,
    VariableReference,
    ScanTarget,
    FileReferences,
    ScanResult,
)
from env_validator.core.scanner.extractors import (
    EXTRACTORS,
    extract_template_refs,
    extract_lookup_refs,
    extract_references,
)
from env_validator.core.scanner.core import (
    detect_dialect,
    iter_scan_targets,
    read_target,
    scan_files,
)
from env_validator.core.scanner.patterns import (
    TEMPLATE_PATTERN,
    LOOKUP_PATTERNS,
    EXTENSION_TO_DIALECT,
)

__all__ = [
    # Models
    "Dialect",
    "VariableReference",
    "ScanTarget",
    "FileReferences",
    "ScanResult",
    # Extractors
    "EXTRACTORS",
    "extract_template_refs",
    "extract_lookup_refs",
    "extract_references",
    # Core
    "detect_dialect",
    "iter_scan_targets",
    "read_target",
    "scan_files",
    # Patterns
    "TEMPLATE_PATTERN",
    "LOOKUP_PATTERNS",
    "EXTENSION_TO_DIALECT",
]
