"""Core entities without I/O for the re-render loop scanner."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Level(Enum):
    """Severity of a finding; only CRITICAL blocks deployment."""

    CRITICAL = "CRITICAL"
    WARNING = "WARNING"


@dataclass(frozen=True)
class SourceFile:
    """One scanned file, addressed relative to the scan root."""

    path: str
    lines: tuple[str, ...]

    @classmethod
    def from_text(cls, path: str, text: str) -> "SourceFile":
        """Split ``text`` on ``\\n``; a final newline does not start a new line."""

        lines = text.split("\n")
        if len(lines) > 1 and lines[-1] == "":
            lines.pop()
        return cls(path=path, lines=tuple(lines))


@dataclass(frozen=True)
class EffectBlock:
    """Extracted text of one effect declaration with 1-based inclusive lines."""

    hook: str
    text: str
    start_line: int
    end_line: int


@dataclass(frozen=True)
class Finding:
    """A single classified problem inside an effect block."""

    level: Level
    file_path: str
    start_line: int
    end_line: int
    message: str
    suggestion: str

    def __post_init__(self) -> None:
        if not 1 <= self.start_line <= self.end_line:
            raise ValueError("Finding line range must satisfy 1 <= start <= end.")

    @property
    def location(self) -> str:
        return f"{self.file_path}:{self.start_line}-{self.end_line}"

    def with_file(self, file_path: str) -> "Finding":
        """Return a copy bound to ``file_path``."""

        return replace(self, file_path=file_path)

    def to_mapping(self) -> dict[str, object]:
        return {
            "level": self.level.value,
            "file_path": self.file_path,
            "start_line": self.start_line,
            "end_line": self.end_line,
            "message": self.message,
            "suggestion": self.suggestion,
        }


@dataclass(frozen=True)
class ScanResult:
    """Outcome of one scan run, returned by value from the tree walker."""

    root: str
    findings: tuple[Finding, ...]
    files_scanned: int
    skipped_files: tuple[str, ...] = ()

    @property
    def critical(self) -> tuple[Finding, ...]:
        return tuple(f for f in self.findings if f.level is Level.CRITICAL)

    @property
    def warnings(self) -> tuple[Finding, ...]:
        return tuple(f for f in self.findings if f.level is Level.WARNING)

    @property
    def safe_to_deploy(self) -> bool:
        """True when no CRITICAL finding was produced."""

        return not self.critical
