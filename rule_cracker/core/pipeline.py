"""
Stage chain for the Rule Cracker.

A pipeline is an ordered list of transform stages followed by a single
MatchSink. Candidates are pushed through depth-first: every candidate a
stage derives is drained through the rest of the chain before the stage
derives the next one. Each forward returns True once every target has been
cracked, and every caller returns immediately when it sees True.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from rule_cracker.core.digest import DigestFunction
from rule_cracker.core.generator import zero_padded
from rule_cracker.core.registry import ResultWriter, TargetRegistry
from rule_cracker.utils.exceptions import OutputSinkError

# Tested candidates reported to the progress bar per update
PROGRESS_STEP = 1000


class TransformStage(ABC):
    """A stage that derives new candidates from each input candidate"""

    #: Number of candidates derived from each input
    fanout: int = 1

    @abstractmethod
    def derive(self, candidate: str) -> Iterator[str]:
        """Yield derived candidates in forwarding order"""
        pass


class CapitalizeStage(TransformStage):
    """Forwards the candidate, then the candidate with an upper-case first letter"""

    fanout = 2

    def derive(self, candidate: str) -> Iterator[str]:
        yield candidate
        yield capitalize(candidate)

    def __repr__(self) -> str:
        return "add capitalized"


class DigitAppendStage(TransformStage):
    """Appends every zero-padded number of a fixed width"""

    def __init__(self, digits: int):
        if digits < 0:
            raise ValueError("Digit count must not be negative")
        self.digits = digits
        self.fanout = 10 ** digits

    def derive(self, candidate: str) -> Iterator[str]:
        for number in range(self.fanout):
            yield candidate + zero_padded(number, self.digits)

    def __repr__(self) -> str:
        return f"add {self.digits} digits"


def capitalize(word: str) -> str:
    """Upper-case the first character if it is an ASCII lower-case letter"""
    if word and "a" <= word[0] <= "z":
        return word[0].upper() + word[1:]
    return word


@dataclass(frozen=True)
class Match:
    """A cracked target"""
    identifier: str
    plaintext: str
    digest: str

    def __str__(self) -> str:
        return f"{self.identifier} : {self.plaintext}"


class MatchSink:
    """Terminal stage: hashes candidates and checks them against the registry"""

    def __init__(self, registry: TargetRegistry, digest: DigestFunction,
                 writer: Optional[ResultWriter] = None, logger=None):
        """Initialize the sink

        Args:
            registry: Unsolved targets, shared across all rules
            digest: Hash function applied to every candidate
            writer: Optional output file appender
            logger: Optional logger instance
        """
        self.registry = registry
        self.digest = digest
        self.writer = writer
        self.logger = logger
        self.matches: List[Match] = []
        self.tested = 0
        self.progress = None
        self._unreported = 0

    def check(self, candidate: str) -> bool:
        """Test one candidate

        Returns:
            True if this match emptied the registry and the run must stop
        """
        self.tested += 1
        if self.progress is not None:
            self._unreported += 1
            if self._unreported >= PROGRESS_STEP:
                self.flush_progress()

        hashed = self.digest.hexdigest(candidate)
        if hashed not in self.registry:
            return False

        identifier = self.registry.claim(hashed)
        match = Match(identifier, candidate, hashed)
        self.matches.append(match)
        if self.logger:
            self.logger.info(f"Cracked {match}")
        if self.writer is not None:
            try:
                self.writer.append(identifier, candidate)
            except OutputSinkError as e:
                if self.logger:
                    self.logger.error(str(e))

        if self.registry.is_empty():
            if self.logger:
                self.logger.info("All passwords cracked.")
            return True
        return False

    def flush_progress(self) -> None:
        """Push the pending tested count to the progress bar"""
        if self.progress is not None and self._unreported:
            self.progress.update(self._unreported)
        self._unreported = 0


class Pipeline:
    """An ordered chain of transform stages ending in a MatchSink"""

    def __init__(self, stages: Iterable[TransformStage], sink: MatchSink):
        self.stages: list = list(stages) + [sink]

    def forward(self, candidate: str, index: int = 0) -> bool:
        """Push a candidate into the stage at ``index``

        Returns:
            True if the run must stop
        """
        stage = self.stages[index]
        if isinstance(stage, MatchSink):
            return stage.check(candidate)
        for derived in stage.derive(candidate):
            if self.forward(derived, index + 1):
                return True
        return False

    def run(self, seeds: Iterable[str]) -> bool:
        """Feed every seed candidate into stage 0

        Returns:
            True if the run must stop, False once the seeds are exhausted
        """
        for seed in seeds:
            if self.forward(seed):
                return True
        return False
