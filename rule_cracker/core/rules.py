"""
Rule parsing for the Rule Cracker.

Rules file syntax, one rule per line::

    # comment
    read "words.txt" | add capitalized | add 2 digits
    permute "abc123"
    1 to 6 digits

The first command of a rule is a generator, the remaining commands are
transform stages.
"""

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from rule_cracker.core.generator import (
    CandidateGenerator,
    NumericRangeGenerator,
    PermutationGenerator,
    WordlistGenerator,
)
from rule_cracker.core.pipeline import (
    CapitalizeStage,
    DigitAppendStage,
    MatchSink,
    Pipeline,
    TransformStage,
)
from rule_cracker.utils.exceptions import InputFileError, RuleSyntaxError

READ_PATTERN = re.compile(r'read "(.*)"')
PERMUTE_PATTERN = re.compile(r'permute "(.*)"')
RANGE_PATTERN = re.compile(r'(\d+) to (\d+) digits?')
CAPITALIZE_PATTERN = re.compile(r'add capitalized')
APPEND_PATTERN = re.compile(r'add (\d+) digits?')


@dataclass
class Rule:
    """A parsed rule: one generator and its transform stages"""
    generator: CandidateGenerator
    stages: List[TransformStage] = field(default_factory=list)
    text: str = ""
    line_number: Optional[int] = None

    def build_pipeline(self, sink: MatchSink) -> Pipeline:
        """Chain this rule's stages in front of ``sink``"""
        return Pipeline(self.stages, sink)

    def estimated_count(self) -> Optional[int]:
        """Candidates this rule sends to the sink, if known up front"""
        seeds = self.generator.get_total_count()
        if seeds is None:
            return None
        total = seeds
        for stage in self.stages:
            total *= stage.fanout
        return total


def parse_generator(command: str, line_number: Optional[int] = None) -> CandidateGenerator:
    """Parse the first command of a rule"""
    match = READ_PATTERN.fullmatch(command)
    if match:
        return WordlistGenerator(match.group(1))
    match = PERMUTE_PATTERN.fullmatch(command)
    if match:
        return PermutationGenerator(match.group(1))
    match = RANGE_PATTERN.fullmatch(command)
    if match:
        return NumericRangeGenerator(int(match.group(1)), int(match.group(2)))
    raise RuleSyntaxError(command, line_number)


def parse_stage(command: str, line_number: Optional[int] = None) -> TransformStage:
    """Parse one of the commands following the generator"""
    if CAPITALIZE_PATTERN.fullmatch(command):
        return CapitalizeStage()
    match = APPEND_PATTERN.fullmatch(command)
    if match:
        return DigitAppendStage(int(match.group(1)))
    raise RuleSyntaxError(command, line_number)


def is_rule_line(line: str) -> bool:
    """Blank lines and '#' comments are not rules"""
    stripped = line.strip()
    return bool(stripped) and not stripped.startswith("#")


def parse_rule(line: str, line_number: Optional[int] = None) -> Rule:
    """Parse a single rule line

    Raises:
        RuleSyntaxError: If any command is not recognized
    """
    commands = line.split("|")
    # Trailing empty commands are ignored, so 'read "w.txt" |' is valid
    while len(commands) > 1 and not commands[-1].strip():
        commands.pop()

    generator = parse_generator(commands[0].strip(), line_number)
    stages = [parse_stage(command.strip(), line_number) for command in commands[1:]]
    return Rule(generator, stages, text=line.strip(), line_number=line_number)


def parse_rules(lines: Iterable[str]) -> List[Rule]:
    """Parse every rule in a rules file, skipping blank lines and comments"""
    return [
        parse_rule(line, line_number)
        for line_number, line in enumerate(lines, 1)
        if is_rule_line(line)
    ]


def load_rules(path: str) -> List[Rule]:
    """Load and parse a rules file"""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise InputFileError(f"Couldn't read from rules file: {e}")
    return parse_rules(lines)
