# ==============================================
# Feature Classifier
# ==============================================
#
# PURPOSE:
#   Takes the name of a game feature as reported by the host
#   ("HDR Available", "Video: HDR", "No HDR", ...) and decides
#   whether it advertises HDR support.
#
# CLASS: FeatureClassifier
# ------------------------
#   Stateless after construction; patterns are compiled once.
#
#   Methods:
#   --------
#   - is_hdr_feature(feature_name: str) -> bool
#       Applies rules in order:
#
#       RULE 1: BLANK NAMES → NOT HDR
#         None, "" and whitespace-only names never match.
#
#       RULE 2: NO HDR TOKEN → NOT HDR
#         The name must contain one of the HDR tokens as a whole
#         word, case-insensitively ("HDR!" matches, "Has_Hdr" and
#         "phraseWithHdrInside" do not).
#
#       RULE 3: NEGATED → NOT HDR
#         Any negation token as a whole word cancels the match
#         ("No HDR", "hdr not supported"). "HDR Note" is not negated.
#
#       RULE 4: OTHERWISE → HDR
#
#   - hdr_feature_ids(features: Iterable[GameFeature]) -> set[UUID]
#       Ids of every feature whose name is an HDR feature.
#
# ==============================================

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Pattern, Set
from uuid import UUID

from hdr_manager.library.models import GameFeature


@dataclass
class ClassificationTokens:
    """
    Word lists driving the classification.

    Tokens are matched literally (regex metacharacters are escaped)
    and as whole words.
    """

    hdr_tokens: List[str] = field(default_factory=lambda: [
        "HDR",
        "High Dynamic Range",
        "H D R",
    ])

    negation_tokens: List[str] = field(default_factory=lambda: [
        "No",
        "Not",
        "Without",
        "Disable",
        "Disabled",
    ])


def _word_boundary_pattern(tokens: Iterable[str]) -> Pattern[str]:
    alternatives = "|".join(rf"\b{re.escape(token)}\b" for token in tokens)
    return re.compile(alternatives, re.IGNORECASE)


class FeatureClassifier:
    """
    Classifies host feature names as HDR or not HDR.
    """

    def __init__(self, tokens: Optional[ClassificationTokens] = None):
        """
        Initialize the classifier with configurable tokens.

        Args:
            tokens: Optional ClassificationTokens. If not provided,
                    the default HDR and negation words are used.
        """
        self.tokens = tokens or ClassificationTokens()
        self._hdr_pattern = _word_boundary_pattern(self.tokens.hdr_tokens)
        self._negation_pattern = _word_boundary_pattern(self.tokens.negation_tokens)

    def is_hdr_feature(self, feature_name: Optional[str]) -> bool:
        """
        Decide whether a feature name advertises HDR support.

        Args:
            feature_name: Name of the feature as stored by the host

        Returns:
            True if the name contains an HDR token and no negation token
        """
        if not feature_name or not feature_name.strip():
            return False

        if not self._hdr_pattern.search(feature_name):
            return False

        return self._negation_pattern.search(feature_name) is None

    def hdr_feature_ids(self, features: Iterable[GameFeature]) -> Set[UUID]:
        """
        Collect the ids of all HDR features.

        Args:
            features: Features known to the host database

        Returns:
            Set of feature ids classified as HDR
        """
        return {feature.id for feature in features if self.is_hdr_feature(feature.name)}


_default_classifier = FeatureClassifier()


def is_hdr_feature(feature_name: Optional[str]) -> bool:
    """Classify a feature name using the default tokens."""
    return _default_classifier.is_hdr_feature(feature_name)
