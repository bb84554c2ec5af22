"""
CLI 入口模块 - 使用 Typer 构建命令行界面

环境变量检查流程：
1. 加载配置
2. 扫描文件
3. 聚合与过滤
4. 检查环境
5. 生成报告
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from env_validator.config import load_config
from env_validator.core import (
    ConfigError,
    ScanIOError,
    ValidationConfig,
    ValidationFailure,
    aggregate_references,
    run_validation,
    scan_files,
)
from env_validator.reporters import JsonReporter, Reporter, RichReporter, TextReporter

# 创建 Typer 应用实例
app = typer.Typer(
    name="env-validator",
    help="env-validator: Fail fast when referenced environment variables are missing.",
    add_completion=False,
)

# Rich Console 用于输出
console = Console()

class OutputFormat(str, Enum):
    """报告输出格式"""
    TEXT = "text"
    RICH = "rich"
    JSON = "json"


# 退出码
EXIT_OK = 0
EXIT_MISSING = 1
EXIT_CONFIG_ERROR = 2
EXIT_IO_ERROR = 3


def setup_logging(verbose: bool) -> None:
    """verbose 模式下把 DEBUG 日志输出到 Rich 控制台"""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def get_reporter(format: OutputFormat) -> Reporter:
    """获取对应的报告器"""
    if format is OutputFormat.JSON:
        return JsonReporter()
    if format is OutputFormat.RICH:
        return RichReporter(console)
    return TextReporter()


def build_config(
    project_dir: str,
    scan_root: Optional[list[str]],
    ignore: Optional[list[str]],
    ignore_defaults: Optional[bool],
    exclude: Optional[list[str]],
) -> ValidationConfig:
    """从命令行参数构建配置，失败时退出"""
    try:
        return load_config(
            Path(project_dir).resolve(),
            scan_roots=scan_root or None,
            ignore_names=ignore or None,
            ignore_defaulted_vars=ignore_defaults,
            exclude=exclude or None,
        )
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(EXIT_CONFIG_ERROR)


def project_dir_arg():
    return typer.Argument(".", help="Project directory (holds pyproject.toml)")


def scan_root_opt():
    return typer.Option(
        None,
        "--scan-root",
        "-s",
        help="File or directory to scan, relative to the project (repeatable)",
    )


def exclude_opt():
    return typer.Option(
        None,
        "--exclude",
        "-e",
        help="Extra gitignore-style pattern to skip while scanning (repeatable)",
    )


@app.command()
def check(
    project_dir: str = project_dir_arg(),
    scan_root: Optional[list[str]] = scan_root_opt(),
    ignore: Optional[list[str]] = typer.Option(
        None,
        "--ignore",
        "-i",
        help="Variable name to exempt from checking (repeatable)",
    ),
    ignore_defaults: Optional[bool] = typer.Option(
        None,
        "--ignore-defaults/--no-ignore-defaults",
        help="Skip variables whose every ${VAR:default} reference carries a default",
    ),
    exclude: Optional[list[str]] = exclude_opt(),
    format: OutputFormat = typer.Option(
        OutputFormat.TEXT,
        "--format",
        "-f",
        help="Output format: text (default), rich or json",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show detailed output",
    ),
) -> None:
    """
    Check that every referenced environment variable is set and non-blank.

    Examples:
        env-validator check
        env-validator check ./service -s src/main/resources -s src/main/kotlin
        env-validator check --ignore LEGACY_VAR --ignore-defaults
        env-validator check --format json
    """
    setup_logging(verbose)
    config = build_config(project_dir, scan_root, ignore, ignore_defaults, exclude)

    if verbose:
        console.print("[dim]Scanning files...[/dim]")
        file_count = 0

        def on_file_scanned(file_path: str, dialect: str) -> None:
            nonlocal file_count
            file_count += 1
            console.print(f"[dim]  ({dialect}) {file_path}[/dim]")
    else:
        on_file_scanned = None

    try:
        result = run_validation(config, on_file=on_file_scanned)
    except ScanIOError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(EXIT_IO_ERROR)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(EXIT_CONFIG_ERROR)

    if verbose:
        console.print(f"[dim]  Scanned {file_count} files[/dim]")

    get_reporter(format).report(result, project_dir)

    try:
        result.raise_for_failure()
    except ValidationFailure:
        raise typer.Exit(EXIT_MISSING)
    raise typer.Exit(EXIT_OK)


@app.command()
def scan(
    project_dir: str = project_dir_arg(),
    scan_root: Optional[list[str]] = scan_root_opt(),
    exclude: Optional[list[str]] = exclude_opt(),
) -> None:
    """
    List referenced variables without checking the environment.

    Examples:
        env-validator scan
        env-validator scan ./service -s config
    """
    config = build_config(project_dir, scan_root, None, None, exclude)

    try:
        scan_result = scan_files(list(config.scan_roots), list(config.exclude))
    except ScanIOError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(EXIT_IO_ERROR)

    aggregated = aggregate_references(scan_result.references)

    table = Table(show_header=True, header_style="bold cyan", box=None)
    table.add_column("Variable", style="cyan")
    table.add_column("Defaulted", justify="center")
    for name in aggregated:
        table.add_row(name, "yes" if aggregated.has_default(name) else "no")

    console.print(table)
    console.print(
        f"[dim]{len(aggregated)} variables in {len(scan_result.files)} files[/dim]"
    )


@app.command()
def version() -> None:
    """Show the version of env-validator."""
    from env_validator import __version__
    console.print(f"[bold]env-validator[/bold] v{__version__}")


if __name__ == "__main__":
    app()
