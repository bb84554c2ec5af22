"""
JSON 报告器 - 输出 JSON 格式报告
"""

import json
import sys
from typing import TextIO

from env_validator.core.validator import ValidationResult, format_report


class JsonReporter:
    """JSON 报告器"""

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def report(self, result: ValidationResult, target: str) -> None:
        """生成 JSON 格式报告"""
        report_data = {
            "target": target,
            "scanned_count": result.scanned_count,
            "missing": list(result.missing),
            "passed": result.passed,
            "message": format_report(result),
        }

        json_str = json.dumps(report_data, indent=2, ensure_ascii=False)
        print(json_str, file=self.output)
