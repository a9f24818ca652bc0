# tests/test_context.py

import pytest

from spantags.context import NameContextGenerator
from spantags.featuregen import (
    PreviousMapFeatureGenerator,
    TokenFeatureGenerator,
    default_feature_generators,
)


def test_previous_outcome_features():
    contexts = NameContextGenerator([TokenFeatureGenerator()])
    features = contexts.get_context(1, ["Pierre", "Vinken", "joined"], ["person-start"])
    assert features == [
        "w=vinken",
        "po=person-start",
        "pow=person-start,Vinken",
        "powf=person-start,ic",
        "ppo=other",
    ]


def test_no_previous_outcome_features_without_prior_tags():
    contexts = NameContextGenerator([TokenFeatureGenerator()])
    assert contexts.get_context(0, ["Pierre"], None) == ["w=pierre"]


def test_add_feature_generator_rebuilds():
    contexts = NameContextGenerator([TokenFeatureGenerator()])
    before = contexts.generators
    contexts.add_feature_generator(PreviousMapFeatureGenerator())
    assert len(before) == 1
    assert len(contexts.generators) == 2
    assert contexts.get_context(0, ["IBM"], None) == ["w=ibm", "pd=None"]


def test_adaptive_data_lifecycle():
    contexts = NameContextGenerator([PreviousMapFeatureGenerator()])
    contexts.update_adaptive_data(["IBM", "said"], ["organization-unit", "other"])
    assert contexts.get_context(0, ["IBM"], None) == ["pd=organization-unit"]

    contexts.clear_adaptive_data()
    assert contexts.get_context(0, ["IBM"], None) == ["pd=None"]


def test_adaptive_data_length_mismatch():
    contexts = NameContextGenerator([PreviousMapFeatureGenerator()])
    with pytest.raises(ValueError):
        contexts.update_adaptive_data(["IBM", "said"], ["other"])


def test_default_context():
    contexts = NameContextGenerator(default_feature_generators())
    features = contexts.get_context(0, ["IBM", "rocks"], [])
    for expected in (
        "w=ibm",
        "n1w=rocks",
        "wc=ac",
        "w&c=ibm,ac",
        "def",
        "pd=None",
        "w,nw=IBM,rocks",
        "po=other",
        "powf=other,ac",
        "ppo=other",
    ):
        assert expected in features
