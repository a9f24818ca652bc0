# spantags/config.py

from __future__ import annotations

import yaml
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class FeatureConfig:
    prev_window: int = 2
    next_window: int = 2
    lowercase: bool = True
    word_and_class: bool = True
    bigrams: bool = True
    previous_map: bool = True


@dataclass
class CodecConfig:
    scheme: str = "bio"
    resolve_overlaps: bool = False
    features: FeatureConfig = field(default_factory=FeatureConfig)


def _feature_config(cfg: Dict[str, Any]) -> FeatureConfig:
    window = cfg.get("window") or {}
    return FeatureConfig(
        prev_window=int(window.get("prev", 2)),
        next_window=int(window.get("next", 2)),
        lowercase=bool(cfg.get("lowercase", True)),
        word_and_class=bool(cfg.get("word_and_class", True)),
        bigrams=bool(cfg.get("bigrams", True)),
        previous_map=bool(cfg.get("previous_map", True)),
    )


def load_config(path: str) -> CodecConfig:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}

    codec_cfg = cfg.get("codec") or {}
    features_cfg = cfg.get("features") or {}

    return CodecConfig(
        scheme=str(codec_cfg.get("scheme", "bio")),
        resolve_overlaps=bool(codec_cfg.get("resolve_overlaps", False)),
        features=_feature_config(features_cfg),
    )
