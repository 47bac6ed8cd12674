"""
Core functionality for the Rule Cracker.
"""

from .cracker import HashCracker, CrackResult
from .digest import DigestFunction
from .generator import (
    CandidateGenerator,
    WordlistGenerator,
    PermutationGenerator,
    NumericRangeGenerator,
)
from .pipeline import (
    TransformStage,
    CapitalizeStage,
    DigitAppendStage,
    Match,
    MatchSink,
    Pipeline,
)
from .registry import TargetRegistry, ResultWriter
from .rules import Rule, parse_rule, parse_rules, load_rules
from .variants import subset_permutations, index_power_set, substitute_variants
