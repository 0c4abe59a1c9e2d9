# ==============================================
# ANALYSIS: FEATURE CLASSIFICATION
# ==============================================
#
# This package decides which of the host's game features
# describe HDR support.
#
# Modules:
# --------
# - feature_classifier.py → Token rules, HDR predicate, feature id lookup
#
# ==============================================

from .feature_classifier import (
    ClassificationTokens,
    FeatureClassifier,
    is_hdr_feature,
)

__all__ = [
    "ClassificationTokens",
    "FeatureClassifier",
    "is_hdr_feature",
]
