"""
Main cracker class for the Rule Cracker.

This module provides the HashCracker class that runs rules against a set of
target digests.
"""

import time
from contextlib import closing
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple, Union

from tqdm import tqdm

from .digest import DigestFunction
from .pipeline import Match, MatchSink
from .registry import ResultWriter, TargetRegistry
from .rules import Rule, load_rules
from rule_cracker.utils.logger import Logger


@dataclass
class CrackResult:
    """Outcome of a cracking run"""
    total: int
    matches: List[Match] = field(default_factory=list)
    unsolved: List[Tuple[str, str]] = field(default_factory=list)
    remaining: int = 0
    tested: int = 0
    elapsed: float = 0.0

    @property
    def all_cracked(self) -> bool:
        return self.remaining == 0

    def summary_lines(self) -> List[str]:
        """Solved count and a preview of the unsolved targets"""
        lines = [f"Cracked {self.total - self.remaining} / {self.total} passwords."]
        if self.remaining:
            lines.append("Uncracked:")
            lines.extend(f"  {identifier} : {digest}" for identifier, digest in self.unsolved)
            hidden = self.remaining - len(self.unsolved)
            if hidden > 0:
                lines.append(f"  And {hidden} more...")
        return lines


class HashCracker:
    """Main class for cracking digests with rules"""

    def __init__(self, registry: TargetRegistry, algorithm: Union[str, DigestFunction] = "sha256",
                 output_path: Optional[str] = None, logger=None,
                 show_progress: bool = True, unsolved_preview: int = 6):
        """Initialize with targets, digest algorithm and output file

        Args:
            registry: Unsolved targets
            algorithm: Algorithm name or DigestFunction instance
            output_path: Optional file that solved pairs are appended to
            logger: Optional logger instance
            show_progress: Whether to show a progress bar per rule
            unsolved_preview: How many unsolved targets the result lists
        """
        self.registry = registry
        self.digest = algorithm if isinstance(algorithm, DigestFunction) else DigestFunction(algorithm)
        self.writer = ResultWriter(output_path) if output_path else None
        self.logger = logger or Logger(name="rule_cracker.cracker").get_logger()
        self.show_progress = show_progress
        self.unsolved_preview = unsolved_preview

        self.sink = MatchSink(self.registry, self.digest, self.writer, self.logger)
        self.progress_bar = None
        self.start_time = 0.0

    @classmethod
    def from_file(cls, input_path: str, **kwargs) -> "HashCracker":
        """Create a cracker for the targets listed in ``input_path``"""
        return cls(TargetRegistry.load(input_path), **kwargs)

    def crack_rule(self, rule: Rule) -> bool:
        """Run a single rule to exhaustion

        Returns:
            True if every target has been cracked
        """
        if self.registry.is_empty():
            return True

        self.logger.debug(f"Running rule: {rule.text or rule.generator!r}")
        pipeline = rule.build_pipeline(self.sink)

        if self.show_progress:
            self.progress_bar = tqdm(total=rule.estimated_count(), unit="pw",
                                     desc=rule.text or None, leave=False)
            self.sink.progress = self.progress_bar
        try:
            seeds = iter(rule.generator)
            if hasattr(seeds, "close"):
                with closing(seeds):
                    return pipeline.run(seeds)
            return pipeline.run(seeds)
        finally:
            self.sink.flush_progress()
            self.sink.progress = None
            if self.progress_bar:
                self.progress_bar.close()
                self.progress_bar = None

    def crack(self, rules: Iterable[Rule]) -> CrackResult:
        """Run rules in order until they are exhausted or every target is cracked

        Args:
            rules: Parsed rules

        Returns:
            Summary of the run
        """
        self.start_time = time.time()
        self.logger.info(f"Beginning now with {len(self.registry)} target(s) "
                         f"using {self.digest.algorithm}...")

        for rule in rules:
            if self.crack_rule(rule):
                break

        result = CrackResult(
            total=self.registry.total,
            matches=list(self.sink.matches),
            unsolved=self.registry.unsolved(self.unsolved_preview),
            remaining=len(self.registry),
            tested=self.sink.tested,
            elapsed=time.time() - self.start_time,
        )
        self.logger.info(f"Candidates tested: {result.tested:,}")
        self.logger.info(f"Time taken: {result.elapsed:.2f} seconds")
        return result

    def crack_with_rules_file(self, rules_path: str) -> CrackResult:
        """Parse every rule in ``rules_path``, then run them"""
        rules = load_rules(rules_path)
        self.logger.info(f"Loaded {len(rules)} rule(s) from {rules_path}")
        return self.crack(rules)
