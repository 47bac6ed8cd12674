"""
Word list filtering for the Rule Cracker.
"""

from typing import Callable, Iterable, Iterator, Optional


def build_predicate(length: Optional[int] = None, contains: str = "") -> Callable[[str], bool]:
    """Build a word filter

    Args:
        length: Keep only words of exactly this length
        contains: Keep only words containing at least one of these characters

    Returns:
        Predicate that accepts every word when neither filter is given
    """
    wanted = set(contains)

    def predicate(word: str) -> bool:
        if length is not None and len(word) != length:
            return False
        if wanted and not wanted.intersection(word):
            return False
        return True

    return predicate


def filter_words(lines: Iterable[str], predicate: Callable[[str], bool]) -> Iterator[str]:
    """Yield the lines accepted by ``predicate``, without line terminators"""
    for line in lines:
        word = line.rstrip('\r\n')
        if predicate(word):
            yield word
