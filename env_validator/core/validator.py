"""
核心验证器模块 - 验证项目引用的环境变量是否已设置

单次线性流程：
1. 扫描文件，提取引用
2. 聚合去重
3. 应用忽略规则
4. 检查进程环境
5. 生成报告
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from env_validator.core.aggregator import aggregate_references
from env_validator.core.environment import EnvironmentSource, VariableCheck, check_environment
from env_validator.core.errors import ConfigError, ValidationFailure
from env_validator.core.ignore import filter_references
from env_validator.core.scanner import ScanResult, scan_files
from env_validator.core.scanner.core import ProgressCallback

logger = logging.getLogger(__name__)

FAILURE_HEADER = "❌ Environment Validation Failed!"
FAILURE_DETAIL = (
    "The following variables were detected in your project "
    "but are missing from your environment:"
)


@dataclass(frozen=True)
class ValidationConfig:
    """
    单次运行的配置，构造后不再修改

    Attributes:
        scan_roots: 扫描根（目录或文件），按给定顺序遍历
        ignore_names: 无论是否有默认值都不检查的变量名
        ignore_defaulted_vars: 为真时，每次出现都带默认值的变量不检查
        exclude: 额外的 gitignore 风格排除模式
    """
    scan_roots: tuple[Path, ...] = ()
    ignore_names: frozenset[str] = frozenset()
    ignore_defaulted_vars: bool = False
    exclude: tuple[str, ...] = ()


@dataclass(frozen=True)
class ValidationResult:
    """
    验证结果

    Attributes:
        scanned_count: 待检查集合的大小
        missing: 缺失的变量名，按首次发现顺序
        passed: 没有缺失变量时为真
    """
    scanned_count: int
    missing: tuple[str, ...] = ()
    passed: bool = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "passed", not self.missing)

    @property
    def message(self) -> str:
        return format_report(self)

    def raise_for_failure(self) -> None:
        """缺失变量时抛出携带完整列表的 ValidationFailure"""
        if not self.passed:
            raise ValidationFailure(list(self.missing), self.message)


def build_report(checks: list[VariableCheck]) -> ValidationResult:
    """把检查结果转为 ValidationResult"""
    return ValidationResult(
        scanned_count=len(checks),
        missing=tuple(check.name for check in checks if check.missing),
    )


def format_report(result: ValidationResult) -> str:
    """
    生成报告文本

    失败时为标题加每个缺失变量一行；成功时为一行说明检查数量。
    """
    if result.passed:
        return f"✅ Environment validated. Scanned {result.scanned_count} variables."
    lines = [FAILURE_HEADER, FAILURE_DETAIL]
    lines.extend(f" - {name}" for name in result.missing)
    return "\n".join(lines)


def check_scan_roots(config: ValidationConfig) -> None:
    """扫描开始前确认所有扫描根存在"""
    if not config.scan_roots:
        raise ConfigError("No scan roots configured")
    for root in config.scan_roots:
        if not root.exists():
            raise ConfigError(f"Scan root does not exist: {root}")


def collect_to_check(scan_result: ScanResult, config: ValidationConfig) -> list[str]:
    """聚合扫描结果并应用忽略规则"""
    aggregated = aggregate_references(scan_result.references)
    to_check = filter_references(
        aggregated,
        ignore_names=config.ignore_names,
        ignore_defaulted_vars=config.ignore_defaulted_vars,
    )
    logger.debug(f"{len(aggregated)} distinct variables referenced, {len(to_check)} to check")
    return to_check


def run_validation(
    config: ValidationConfig,
    environment: Optional[EnvironmentSource] = None,
    on_file: Optional[ProgressCallback] = None,
) -> ValidationResult:
    """
    执行完整流程并返回结果

    缺失变量不会抛出异常，调用方通过 result.passed 或 raise_for_failure() 处理。
    文件读取失败会抛出 ScanIOError，不产生部分结果。
    """
    check_scan_roots(config)
    scan_result = scan_files(list(config.scan_roots), list(config.exclude), on_file=on_file)
    to_check = collect_to_check(scan_result, config)
    checks = check_environment(to_check, environment)
    result = build_report(checks)
    logger.info(
        f"Checked {result.scanned_count} variables across {len(scan_result.files)} files, "
        f"{len(result.missing)} missing"
    )
    return result


def validate(
    config: ValidationConfig,
    environment: Optional[EnvironmentSource] = None,
) -> ValidationResult:
    """执行流程，缺失变量时抛出 ValidationFailure"""
    result = run_validation(config, environment)
    result.raise_for_failure()
    return result
