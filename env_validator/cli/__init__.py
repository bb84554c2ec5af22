"""
CLI Layer - 命令行接口层

提供命令行入口。
"""

from env_validator.cli.app import app, check, scan, version

__all__ = [
    "app",
    "check",
    "scan",
    "version",
]
