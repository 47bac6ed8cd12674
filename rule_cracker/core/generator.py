"""
Candidate generator classes for the Rule Cracker.

A generator is the first command of a rule. It produces seed candidates one
at a time; nothing is materialized except the permutation set.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional

from rule_cracker.core.variants import subset_permutations
from rule_cracker.utils.exceptions import WordSourceError


def zero_padded(number: int, width: int) -> str:
    """Render ``number`` as exactly ``width`` decimal digits"""
    if width == 0:
        return ""
    return str(number).zfill(width)


class CandidateGenerator(ABC):
    """Abstract base class for candidate generators"""

    @abstractmethod
    def __iter__(self) -> Iterator[str]:
        """Yield seed candidates in generation order"""
        pass

    @abstractmethod
    def get_total_count(self) -> Optional[int]:
        """Get the number of candidates, or None if it is not known up front"""
        pass


class WordlistGenerator(CandidateGenerator):
    """Generator that reads candidates from a word file, one per line"""

    def __init__(self, path: str):
        """Initialize with path to the word file

        The file is opened only when iteration starts.
        """
        self.path = path

    def __iter__(self) -> Iterator[str]:
        try:
            with open(self.path, 'r', encoding='utf-8', errors='surrogateescape', newline='') as f:
                for line in f:
                    yield line.rstrip('\r\n')
        except OSError as e:
            raise WordSourceError(f"Couldn't read from word file: {e}")

    def get_total_count(self) -> Optional[int]:
        """Word files are streamed, so their size is unknown"""
        return None

    def __repr__(self) -> str:
        return f'read "{self.path}"'


class PermutationGenerator(CandidateGenerator):
    """Generator for every ordering of every subset of a character pool"""

    def __init__(self, pool: str):
        """Initialize with the characters to permute"""
        self.pool = pool
        self._permutations: Optional[List[str]] = None

    @property
    def permutations(self) -> List[str]:
        """The expanded set, ordered by length and then alphabetically"""
        if self._permutations is None:
            self._permutations = sorted(subset_permutations(self.pool), key=lambda s: (len(s), s))
        return self._permutations

    def __iter__(self) -> Iterator[str]:
        return iter(self.permutations)

    def get_total_count(self) -> Optional[int]:
        return len(self.permutations)

    def __repr__(self) -> str:
        return f'permute "{self.pool}"'


class NumericRangeGenerator(CandidateGenerator):
    """Generator for zero-padded numbers over a range of digit widths"""

    def __init__(self, min_digits: int, max_digits: int):
        """Initialize with the smallest and largest digit width"""
        if min_digits < 0 or max_digits < 0:
            raise ValueError("Digit widths must not be negative")
        self.min_digits = min_digits
        self.max_digits = max_digits

    def __iter__(self) -> Iterator[str]:
        for width in range(self.min_digits, self.max_digits + 1):
            for number in range(10 ** width):
                yield zero_padded(number, width)

    def get_total_count(self) -> Optional[int]:
        return sum(10 ** width for width in range(self.min_digits, self.max_digits + 1))

    def __repr__(self) -> str:
        return f"{self.min_digits} to {self.max_digits} digits"
