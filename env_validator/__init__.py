"""
env-validator - 检查项目引用的环境变量是否已在运行环境中设置
"""

from env_validator.core import (
    ConfigError,
    ScanIOError,
    ValidationConfig,
    ValidationFailure,
    ValidationResult,
    run_validation,
    validate,
)
from env_validator.config import load_config

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ScanIOError",
    "ValidationConfig",
    "ValidationFailure",
    "ValidationResult",
    "load_config",
    "run_validation",
    "validate",
    "__version__",
]
