"""
错误类型

- ConfigError: 配置错误，扫描开始前抛出
- ScanIOError: 扫描过程中文件或目录无法读取，致命
- ValidationFailure: 存在缺失的环境变量，携带完整的缺失列表
"""

from pathlib import Path


class EnvValidatorError(Exception):
    """Base class for all env-validator errors."""


class ConfigError(EnvValidatorError):
    """Configuration is malformed or points at something that does not exist."""


class ScanIOError(EnvValidatorError):
    """A scan target could not be read."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"Failed to read {path}: {reason}")


class ValidationFailure(EnvValidatorError):
    """One or more referenced variables are missing or blank."""

    def __init__(self, missing: list[str], message: str = ""):
        self.missing = list(missing)
        super().__init__(message or f"Missing environment variables: {', '.join(self.missing)}")
