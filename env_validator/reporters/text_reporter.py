"""
文本报告器 - 输出纯文本报告，每个缺失变量一行，便于 grep
"""

import sys
from typing import TextIO

from env_validator.core.validator import ValidationResult, format_report


class TextReporter:
    """纯文本报告器"""

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def report(self, result: ValidationResult, target: str) -> None:
        print(format_report(result), file=self.output)
