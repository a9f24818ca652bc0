# spantags/featuregen.py

from __future__ import annotations

import regex as re
from typing import Dict, List, Optional, Sequence

from .config import FeatureConfig

CAP_PERIOD_RE = re.compile(r"^\p{Lu}\.$")


def token_class(token: str) -> str:
    """
    Coarse shape class of a token:
      lc    all lowercase letters
      2d/4d exactly two / four digits
      an    digits and letters
      dd/ds/dc/dp  digits with hyphen / slash / comma / period
      num   other numbers
      sc/ac single / all capital letters
      cp    capital + period ("J.")
      ic    initial capital
      other anything else
    """
    letters = [c for c in token if c.isalpha()]
    digits = sum(1 for c in token if c.isdigit())

    if token and len(letters) == len(token) and all(c.islower() for c in letters):
        return "lc"
    if digits == 2 and digits == len(token):
        return "2d"
    if digits == 4 and digits == len(token):
        return "4d"
    if digits:
        if letters:
            return "an"
        if "-" in token:
            return "dd"
        if "/" in token:
            return "ds"
        if "," in token:
            return "dc"
        if "." in token:
            return "dp"
        return "num"
    if token and len(letters) == len(token) and all(c.isupper() for c in letters):
        return "sc" if len(token) == 1 else "ac"
    if CAP_PERIOD_RE.search(token):
        return "cp"
    if token and token[0].isupper():
        return "ic"
    return "other"


class FeatureGenerator:
    """
    Base class for pluggable context features.

    Adaptive generators remember decisions across the sentences of a
    document; the state is reset with clear_adaptive_data().
    """

    def create_features(
        self,
        features: List[str],
        tokens: Sequence[str],
        index: int,
        prior_tags: Optional[Sequence[str]],
    ) -> None:
        raise NotImplementedError

    def update_adaptive_data(self, tokens: Sequence[str], outcomes: Sequence[str]) -> None:
        pass

    def clear_adaptive_data(self) -> None:
        pass


class TokenFeatureGenerator(FeatureGenerator):
    def __init__(self, lowercase: bool = True):
        self.lowercase = lowercase

    def create_features(self, features, tokens, index, prior_tags):
        token = tokens[index]
        features.append("w=" + (token.lower() if self.lowercase else token))


class TokenClassFeatureGenerator(FeatureGenerator):
    def __init__(self, word_and_class: bool = False):
        self.word_and_class = word_and_class

    def create_features(self, features, tokens, index, prior_tags):
        wc = token_class(tokens[index])
        features.append("wc=" + wc)
        if self.word_and_class:
            features.append("w&c=" + tokens[index].lower() + "," + wc)


class WindowFeatureGenerator(FeatureGenerator):
    """
    Runs a generator over neighbouring tokens. Features of the token i
    positions back are prefixed "p<i>", i positions ahead "n<i>".
    """

    def __init__(self, generator: FeatureGenerator, prev_window: int = 2, next_window: int = 2):
        self.generator = generator
        self.prev_window = prev_window
        self.next_window = next_window

    def create_features(self, features, tokens, index, prior_tags):
        self.generator.create_features(features, tokens, index, prior_tags)

        for i in range(1, self.prev_window + 1):
            if index - i >= 0:
                window: List[str] = []
                self.generator.create_features(window, tokens, index - i, prior_tags)
                features.extend(f"p{i}{f}" for f in window)

        for i in range(1, self.next_window + 1):
            if index + i < len(tokens):
                window = []
                self.generator.create_features(window, tokens, index + i, prior_tags)
                features.extend(f"n{i}{f}" for f in window)

    def update_adaptive_data(self, tokens, outcomes):
        self.generator.update_adaptive_data(tokens, outcomes)

    def clear_adaptive_data(self):
        self.generator.clear_adaptive_data()


class OutcomePriorFeatureGenerator(FeatureGenerator):
    # Constant feature so the model learns the outcome prior
    def create_features(self, features, tokens, index, prior_tags):
        features.append("def")


class PreviousMapFeatureGenerator(FeatureGenerator):
    """Remembers the last outcome assigned to each token in the current document."""

    def __init__(self):
        self.previous_map: Dict[str, str] = {}

    def create_features(self, features, tokens, index, prior_tags):
        features.append("pd=" + str(self.previous_map.get(tokens[index])))

    def update_adaptive_data(self, tokens, outcomes):
        if tokens is None or outcomes is None:
            return
        for token, tag in zip(tokens, outcomes):
            self.previous_map[token] = tag

    def clear_adaptive_data(self):
        self.previous_map.clear()


class BigramNameFeatureGenerator(FeatureGenerator):
    def create_features(self, features, tokens, index, prior_tags):
        wc = token_class(tokens[index])
        if index > 0:
            features.append("pw,w=" + tokens[index - 1] + "," + tokens[index])
            features.append("pwc,wc=" + token_class(tokens[index - 1]) + "," + wc)
        if index + 1 < len(tokens):
            features.append("w,nw=" + tokens[index] + "," + tokens[index + 1])
            features.append("wc,nc=" + wc + "," + token_class(tokens[index + 1]))


class AggregatedFeatureGenerator(FeatureGenerator):
    def __init__(self, *generators: FeatureGenerator):
        self.generators = tuple(generators)

    def create_features(self, features, tokens, index, prior_tags):
        for generator in self.generators:
            generator.create_features(features, tokens, index, prior_tags)

    def update_adaptive_data(self, tokens, outcomes):
        for generator in self.generators:
            generator.update_adaptive_data(tokens, outcomes)

    def clear_adaptive_data(self):
        for generator in self.generators:
            generator.clear_adaptive_data()


def default_feature_generators(config: Optional[FeatureConfig] = None) -> List[FeatureGenerator]:
    """
    Token and token-class windows, outcome prior, previous-map and bigram
    features. Each call returns fresh generators, so adaptive state is never
    shared between taggers.
    """
    config = config or FeatureConfig()

    generators: List[FeatureGenerator] = [
        WindowFeatureGenerator(
            TokenFeatureGenerator(config.lowercase), config.prev_window, config.next_window
        ),
        WindowFeatureGenerator(
            TokenClassFeatureGenerator(config.word_and_class),
            config.prev_window,
            config.next_window,
        ),
        OutcomePriorFeatureGenerator(),
    ]
    if config.previous_map:
        generators.append(PreviousMapFeatureGenerator())
    if config.bigrams:
        generators.append(BigramNameFeatureGenerator())
    return generators
