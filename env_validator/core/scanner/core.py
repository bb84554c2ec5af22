"""
核心扫描函数

遍历扫描根目录，按扩展名识别方言，并把文件内容交给对应的提取器。

遍历规则：
- 扫描根按给定顺序访问，目录项按名称字典序访问（决定首次发现顺序）
- 跳过隐藏文件和目录（以 . 开头）
- 不进入符号链接目录；符号链接文件按普通文件读取
- 构建输出目录通过 PathspecFilter 排除
- 任何无法读取的文件或目录都会抛出 ScanIOError，绝不静默跳过
"""

import logging
from pathlib import Path
from typing import Callable, Iterator, Optional

from env_validator.core.errors import ScanIOError
from env_validator.core.scanner.extractors import extract_references
from env_validator.core.scanner.models import (
    Dialect,
    FileReferences,
    ScanResult,
    ScanTarget,
)
from env_validator.core.scanner.patterns import EXTENSION_TO_DIALECT
from env_validator.filters import PathspecFilter

logger = logging.getLogger(__name__)

# 进度回调类型
ProgressCallback = Callable[[str, str], None]


def detect_dialect(path: Path) -> Optional[Dialect]:
    """按扩展名识别方言，无法识别返回 None"""
    return EXTENSION_TO_DIALECT.get(path.suffix.lower())


def _walk(directory: Path, path_filter: PathspecFilter) -> Iterator[Path]:
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise ScanIOError(directory, e) from e

    for entry in entries:
        is_dir = entry.is_dir() and not entry.is_symlink()
        if path_filter.should_ignore(entry, is_dir=is_dir):
            continue
        if is_dir:
            yield from _walk(entry, path_filter)
        elif not entry.is_dir():
            yield entry


def iter_scan_targets(
    scan_roots: list[Path],
    exclude: Optional[list[str]] = None,
) -> Iterator[ScanTarget]:
    """
    按确定的顺序枚举所有扫描根下的文件

    Args:
        scan_roots: 扫描根（目录或单个文件）
        exclude: 额外的 gitignore 风格排除模式

    Yields:
        每个文件的 ScanTarget，无法识别的扩展名 dialect 为 None
    """
    seen: set[Path] = set()
    for root in scan_roots:
        if root.is_dir():
            files = _walk(root, PathspecFilter(root, exclude))
        else:
            files = iter([root])

        for file_path in files:
            key = file_path.absolute()
            if key in seen:
                continue
            seen.add(key)
            yield ScanTarget(path=file_path, dialect=detect_dialect(file_path))


def read_target(target: ScanTarget) -> str:
    """读取文件内容，失败时抛出 ScanIOError"""
    try:
        return target.path.read_text(encoding="utf-8", errors="ignore")
    except OSError as e:
        raise ScanIOError(target.path, e) from e


def scan_files(
    scan_roots: list[Path],
    exclude: Optional[list[str]] = None,
    on_file: Optional[ProgressCallback] = None,
) -> ScanResult:
    """扫描文件并提取所有引用"""
    result = ScanResult()
    skipped = 0

    for target in iter_scan_targets(scan_roots, exclude):
        if target.dialect is None:
            skipped += 1
            continue

        content = read_target(target)
        references = extract_references(content, target.dialect)
        logger.debug(f"{target.path} ({target.dialect.value}): {len(references)} references")

        if on_file:
            on_file(str(target.path), target.dialect.value)

        result.files.append(FileReferences(
            path=str(target.path),
            dialect=target.dialect,
            references=references,
        ))

    logger.debug(f"Scanned {len(result.files)} files, skipped {skipped} with unrecognized extensions")
    return result
