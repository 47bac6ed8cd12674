"""
Rule Cracker

Cracks hashed passwords by running candidates from declarative rules
through a chain of transforms.
"""

from rule_cracker.core.cracker import HashCracker, CrackResult
from rule_cracker.core.registry import TargetRegistry
from rule_cracker.core.rules import Rule, parse_rule, load_rules
from rule_cracker.core.generator import (
    CandidateGenerator,
    WordlistGenerator,
    PermutationGenerator,
    NumericRangeGenerator,
)

__version__ = "0.1.0"
