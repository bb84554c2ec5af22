"""
Rich 终端报告器 - 使用 Rich 库输出彩色终端格式
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from env_validator.core.validator import FAILURE_DETAIL, ValidationResult


class RichReporter:
    """Rich 终端报告器"""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def report(self, result: ValidationResult, target: str) -> None:
        """生成 Rich 格式报告"""
        self.console.print()
        if result.passed:
            self._print_success(result, target)
        else:
            self._print_failure(result, target)
        self.console.print()

    def _print_success(self, result: ValidationResult, target: str) -> None:
        content = Text()
        content.append("✅ Environment validated. ", style="bold green")
        content.append(f"Scanned {result.scanned_count} variables.\n\n")
        content.append(f"Target: {target}", style="dim")

        self.console.print(Panel(
            content,
            title="[bold]🔐 Environment Check[/bold]",
            border_style="green",
        ))

    def _print_failure(self, result: ValidationResult, target: str) -> None:
        self.console.print(f"[bold]{FAILURE_DETAIL}[/bold]")

        table = Table(show_header=True, header_style="bold red", box=None)
        table.add_column("#", justify="right", style="dim", width=4)
        table.add_column("Missing variable", style="red")

        for i, name in enumerate(result.missing, 1):
            table.add_row(str(i), name)

        self.console.print(Panel(
            table,
            title="[bold]❌ Environment Validation Failed![/bold]",
            subtitle=f"[dim]{len(result.missing)} of {result.scanned_count} missing · {target}[/dim]",
            border_style="red",
        ))
        self.console.print(
            "[dim]→ Set each variable to a non-blank value, or add it to the ignore list[/dim]"
        )
