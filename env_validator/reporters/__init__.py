"""
Reporters Layer - 报告层

包含纯文本、Rich 终端和 JSON 报告器。
"""

from env_validator.reporters.base import Reporter
from env_validator.reporters.text_reporter import TextReporter
from env_validator.reporters.rich_reporter import RichReporter
from env_validator.reporters.json_reporter import JsonReporter

__all__ = [
    "Reporter",
    "TextReporter",
    "RichReporter",
    "JsonReporter",
]
