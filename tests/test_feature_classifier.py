# ==============================================
# Tests for FeatureClassifier
# ==============================================

import pytest

from hdr_manager.analysis.feature_classifier import (
    ClassificationTokens,
    FeatureClassifier,
    is_hdr_feature,
)
from hdr_manager.library.models import GameFeature


class TestIsHdrFeature:
    @pytest.mark.parametrize("feature_name", [
        "HDR",
        "HDR Available",
        "Video: HDR",
        "Allows HDR",
        "Supports HDR",
        "High Dynamic Range",
        "High Dynamic Range Supported",
        "Has HDR",
        "hdr",
        "hdr supported",
        "HDR!",
        "\tHDR  ",
        "H D R",
        "HDR Note",
    ])
    def test_hdr_names(self, feature_name):
        assert is_hdr_feature(feature_name) is True

    @pytest.mark.parametrize("feature_name", [
        "Miscellaneous",
        "No HDR",
        "Not HDR",
        "HDR Disabled",
        "Without HDR",
        "Disable HDR",
        "Disabled HDR",
        "phraseWithHdrInside",
        "hdr not supported",
        "",
        "      ",
        "\tNo HDR  ",
        "HD",
        "HD-R",
        "Has_Hdr",
    ])
    def test_non_hdr_names(self, feature_name):
        assert is_hdr_feature(feature_name) is False

    def test_none_is_not_hdr(self):
        assert is_hdr_feature(None) is False


class TestFeatureClassifier:
    def test_custom_tokens(self):
        """Extra tokens are matched as whole words like the defaults."""
        tokens = ClassificationTokens(
            hdr_tokens=["HDR", "Dolby Vision"],
            negation_tokens=["No", "Unsupported"],
        )
        classifier = FeatureClassifier(tokens)

        assert classifier.is_hdr_feature("Dolby Vision") is True
        assert classifier.is_hdr_feature("HDR (Unsupported)") is False
        assert classifier.is_hdr_feature("Without HDR") is True

    def test_tokens_are_escaped(self):
        classifier = FeatureClassifier(ClassificationTokens(hdr_tokens=["HDR+"], negation_tokens=[]))

        assert classifier.is_hdr_feature("HDR+ Mode") is False
        assert classifier.is_hdr_feature("HDRR") is False

    def test_hdr_feature_ids(self):
        hdr = GameFeature("HDR Available")
        also_hdr = GameFeature("High Dynamic Range")
        negated = GameFeature("No HDR")
        other = GameFeature("Single Player")

        ids = FeatureClassifier().hdr_feature_ids([hdr, also_hdr, negated, other])

        assert ids == {hdr.id, also_hdr.id}

    def test_hdr_feature_ids_empty(self):
        assert FeatureClassifier().hdr_feature_ids([]) == set()

    def test_default_tokens(self):
        tokens = ClassificationTokens()

        assert tokens.hdr_tokens == ["HDR", "High Dynamic Range", "H D R"]
        assert tokens.negation_tokens == ["No", "Not", "Without", "Disable", "Disabled"]
