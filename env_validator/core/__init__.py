"""
Core Layer - 核心层

包含文件扫描器、引用聚合、忽略过滤、环境检查和验证流程。
"""

from env_validator.core.errors import (
    EnvValidatorError,
    ConfigError,
    ScanIOError,
    ValidationFailure,
)
from env_validator.core.scanner import (
    Dialect,
    VariableReference,
    ScanTarget,
    ScanResult,
    extract_template_refs,
    extract_lookup_refs,
    iter_scan_targets,
    scan_files,
)
from env_validator.core.aggregator import (
    AggregatedReferenceSet,
    aggregate_references,
)
from env_validator.core.ignore import filter_references
from env_validator.core.environment import (
    EnvironmentSource,
    ProcessEnvironment,
    MappingEnvironment,
    VariableStatus,
    VariableCheck,
    check_environment,
)
from env_validator.core.validator import (
    ValidationConfig,
    ValidationResult,
    build_report,
    format_report,
    run_validation,
    validate,
)

__all__ = [
    # errors
    "EnvValidatorError",
    "ConfigError",
    "ScanIOError",
    "ValidationFailure",
    # scanner
    "Dialect",
    "VariableReference",
    "ScanTarget",
    "ScanResult",
    "extract_template_refs",
    "extract_lookup_refs",
    "iter_scan_targets",
    "scan_files",
    # aggregation
    "AggregatedReferenceSet",
    "aggregate_references",
    "filter_references",
    # environment
    "EnvironmentSource",
    "ProcessEnvironment",
    "MappingEnvironment",
    "VariableStatus",
    "VariableCheck",
    "check_environment",
    # validator
    "ValidationConfig",
    "ValidationResult",
    "build_report",
    "format_report",
    "run_validation",
    "validate",
]
