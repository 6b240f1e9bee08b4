"""
Services package for name declension.

This package contains the service classes used by the declension engine,
organized by responsibility.
"""

from slavonym.services.formatting import NameFormattingService
from slavonym.services.hyphenation import HyphenSplitter
from slavonym.services.inference import InferenceService
from slavonym.services.process_pool import PersistentMultiprocessDecliner, decline_names_multiprocess
from slavonym.services.rules import EvaluationContext, RuleChainEvaluator, RulePack, contains, tail

__all__ = [
    "EvaluationContext",
    "HyphenSplitter",
    "InferenceService",
    "NameFormattingService",
    "PersistentMultiprocessDecliner",
    "RuleChainEvaluator",
    "RulePack",
    "contains",
    "decline_names_multiprocess",
    "tail",
]
