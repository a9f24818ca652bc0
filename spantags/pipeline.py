# spantags/pipeline.py

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Tuple

from .codec import SequenceCodec, get_codec
from .config import CodecConfig, load_config
from .context import NameContextGenerator
from .featuregen import default_feature_generators
from .models import NameSample, Span
from .resolve import drop_overlapping_spans

logger = logging.getLogger(__name__)


def codec_for(config: CodecConfig) -> SequenceCodec:
    return get_codec(config.scheme)


def _names_for(sample: NameSample, config: CodecConfig) -> List[Span]:
    if not config.resolve_overlaps:
        return list(sample.names)

    names = drop_overlapping_spans(sample.names)
    if len(names) != len(sample.names):
        logger.info("Dropped %d overlapping name(s)", len(sample.names) - len(names))
    return names


def encode_sample(sample: NameSample, config_path: str = "configs/codec.yaml") -> List[str]:
    """
    Turn a labeled sentence into one tag per token.

    With resolve_overlaps enabled, overlapping names are dropped first;
    otherwise the codec lets later names overwrite earlier ones.
    """
    config = load_config(config_path)
    codec = codec_for(config)

    return codec.encode(_names_for(sample, config), len(sample.tokens))


def decode_tags(tags: List[str], config_path: str = "configs/codec.yaml") -> List[Span]:
    config = load_config(config_path)
    return codec_for(config).decode(tags)


def check_vocabulary(tags: Iterable[str], config_path: str = "configs/codec.yaml") -> bool:
    """
    Check that a model's outcome set can drive this codec's decoding.
    Callers should refuse to decode with a model that fails this check.
    """
    config = load_config(config_path)
    tags = list(tags)
    ok = codec_for(config).is_vocabulary_consistent(tags)
    if not ok:
        logger.warning(
            "Tag vocabulary is not consistent with the %s scheme: %s",
            config.scheme,
            sorted(set(tags)),
        )
    return ok


def build_context_generator(config_path: str = "configs/codec.yaml") -> NameContextGenerator:
    config = load_config(config_path)
    return NameContextGenerator(default_feature_generators(config.features))


def generate_events(
    samples: Iterable[NameSample], config_path: str = "configs/codec.yaml"
) -> Iterator[Tuple[List[str], str]]:
    """
    Yield (context, tag) training events for each token of each sample.

    Adaptive state is cleared whenever a sample starts a new document and
    updated with the gold tags after every sentence.
    """
    config = load_config(config_path)
    codec = codec_for(config)
    contexts = NameContextGenerator(default_feature_generators(config.features))

    for sample in samples:
        if sample.clear_adaptive_data:
            contexts.clear_adaptive_data()

        tags = codec.encode(_names_for(sample, config), len(sample.tokens))

        for i, tag in enumerate(tags):
            yield contexts.get_context(i, sample.tokens, tags), tag

        contexts.update_adaptive_data(sample.tokens, tags)
