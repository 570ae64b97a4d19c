"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

CONFIG_ENV_VAR = "TEXT_REFINER_CONFIG"


@dataclass(frozen=True)
class RefinementConfig:
    latency_ms: int = 300  # cosmetic "processing" delay before refine resolves
    min_period_length: int = 20  # texts longer than this get a closing period

    def __post_init__(self):
        if not 0 <= self.latency_ms <= 10_000:
            raise ValueError(
                f"latency_ms must be between 0 and 10000, got {self.latency_ms}"
            )
        if self.min_period_length < 0:
            raise ValueError(
                f"min_period_length must be >= 0, got {self.min_period_length}"
            )

    @property
    def latency_seconds(self) -> float:
        return self.latency_ms / 1000


@dataclass(frozen=True)
class SuggestionConfig:
    max_alternatives: int = 3

    def __post_init__(self):
        if not 1 <= self.max_alternatives <= 10:
            raise ValueError(
                f"max_alternatives must be between 1 and 10, got {self.max_alternatives}"
            )


@dataclass(frozen=True)
class ExportConfig:
    encoding: str = "utf-8"
    output_dir: str = "./output"

    def __post_init__(self):
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"encoding {self.encoding!r} is not a known codec") from exc

    @property
    def resolved_output_dir(self) -> Path:
        return Path(self.output_dir).expanduser()


@dataclass(frozen=True)
class AppConfig:
    refinement: RefinementConfig = field(default_factory=RefinementConfig)
    suggestions: SuggestionConfig = field(default_factory=SuggestionConfig)
    export: ExportConfig = field(default_factory=ExportConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            candidates.insert(0, Path(env_path).expanduser())
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"config must be a mapping of sections, got {type(raw).__name__}")

    return AppConfig(
        refinement=RefinementConfig(**(raw.get("refinement") or {})),
        suggestions=SuggestionConfig(**(raw.get("suggestions") or {})),
        export=ExportConfig(**(raw.get("export") or {})),
    )
