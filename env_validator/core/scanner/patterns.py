"""
正则表达式模式定义

环境变量引用的提取模式和文件扩展名到方言的映射。
"""

import re

from env_validator.core.scanner.models import Dialect

# ${NAME} 或 ${NAME:default}
# Group 1: 变量名, Group 2: (可选) 以冒号开头的默认值部分
# 默认值在同一行的第一个 } 处结束，不支持嵌套花括号
TEMPLATE_PATTERN = re.compile(r'\$\{([A-Z0-9_]+)(:[^}\n]*)?\}')

# 源码中的查找调用，变量名必须是字面量字符串
LOOKUP_PATTERNS: list[tuple[re.Pattern, int]] = [
    # Java / Kotlin: System.getenv("NAME"), java.lang.System.getenv("NAME"), getenv("NAME")
    (re.compile(r'(?:\bSystem\.|(?<![\w.]))getenv\s*\(\s*["\']([A-Z0-9_]+)["\']\s*\)'), 1),
    # Python: os.getenv("NAME"[, default])
    (re.compile(r'\bos\.getenv\s*\(\s*["\']([A-Z0-9_]+)["\']\s*[,)]'), 1),
    # Python: os.environ.get("NAME"[, default])
    (re.compile(r'\bos\.environ\.get\s*\(\s*["\']([A-Z0-9_]+)["\']\s*[,)]'), 1),
    # Python: os.environ["NAME"]
    (re.compile(r'\bos\.environ\s*\[\s*["\']([A-Z0-9_]+)["\']\s*\]'), 1),
]

# 文件扩展名到方言的映射
EXTENSION_TO_DIALECT: dict[str, Dialect] = {
    ".yml": Dialect.CONFIG,
    ".yaml": Dialect.CONFIG,
    ".properties": Dialect.CONFIG,
    ".java": Dialect.CODE,
    ".kt": Dialect.CODE,
    ".py": Dialect.CODE,
}
