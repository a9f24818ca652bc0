# spantags/context.py

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence

from .featuregen import FeatureGenerator, token_class
from .tags import OTHER


class NameContextGenerator:
    """
    Builds the feature list the sequence model sees at one token position.

    Generator output comes first, in order, followed by the previous-outcome
    features (po, pow, powf, ppo) when prior tags are available.
    """

    def __init__(self, generators: Iterable[FeatureGenerator]):
        self.generators = tuple(generators)

    def add_feature_generator(self, generator: FeatureGenerator) -> None:
        self.generators = self.generators + (generator,)

    def update_adaptive_data(
        self,
        tokens: Optional[Sequence[str]],
        outcomes: Optional[Sequence[str]],
    ) -> None:
        if tokens is not None and outcomes is not None and len(tokens) != len(outcomes):
            raise ValueError(
                f"tokens and outcomes must have the same length ({len(tokens)} != {len(outcomes)})"
            )
        for generator in self.generators:
            generator.update_adaptive_data(tokens, outcomes)

    def clear_adaptive_data(self) -> None:
        for generator in self.generators:
            generator.clear_adaptive_data()

    def get_context(
        self,
        index: int,
        tokens: Sequence[str],
        prior_tags: Optional[Sequence[str]],
        extra: Optional[Sequence[Any]] = None,
    ) -> List[str]:
        features: List[str] = []

        for generator in self.generators:
            generator.create_features(features, tokens, index, prior_tags)

        if prior_tags is not None:
            po = prior_tags[index - 1] if index > 0 else OTHER
            ppo = prior_tags[index - 2] if index > 1 else OTHER
            features.append("po=" + po)
            features.append("pow=" + po + "," + tokens[index])
            features.append("powf=" + po + "," + token_class(tokens[index]))
            features.append("ppo=" + ppo)

        return features
