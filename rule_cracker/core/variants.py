"""
Combinatorial variant algorithms.

subset_permutations() backs the ``permute`` generator; substitute_variants()
backs the ``replace`` command.
"""

from typing import Dict, Iterable, Iterator, List, Set, Tuple

from rule_cracker.utils.exceptions import SubstitutionSpecError


def subset_permutations(pool: str) -> Set[str]:
    """Every arrangement of every subset of the characters in ``pool``

    The empty string is always included. Repeated characters in the pool
    collapse into a single result per distinct string.

    Args:
        pool: Characters to permute

    Returns:
        Set of all generated strings
    """
    results = {""}
    for char in reversed(pool):
        for partial in list(results):
            for i in range(len(partial) + 1):
                results.add(partial[:i] + char + partial[i:])
    return results


def index_power_set(word: str, chars: Iterable[str]) -> List[Tuple[int, ...]]:
    """Every non-empty subset of the positions in ``word`` holding one of ``chars``

    For 'balrog' and the characters 'al' the result is [(1,), (2,), (1, 2)].
    Subsets are ordered by their bitmask over the position list.
    """
    wanted = set(chars)
    indices = [i for i, char in enumerate(word) if char in wanted]
    size = len(indices)

    power_set = []
    for mask in range(1, 1 << size):
        power_set.append(tuple(indices[j] for j in range(size) if mask & (1 << j)))
    return power_set


def substitute_variants(word: str, replacements: Dict[str, str]) -> Iterator[str]:
    """Yield one variant of ``word`` per non-empty subset of substitutable positions

    Only the positions in the subset are replaced; the unmodified word is
    never yielded.
    """
    for indices in index_power_set(word, replacements.keys()):
        chars = list(word)
        for index in indices:
            chars[index] = replacements[word[index]]
        yield "".join(chars)


def parse_substitutions(tokens: Iterable[str]) -> Dict[str, str]:
    """Build a replacement map from tokens like 'a@' or 'o0'

    Raises:
        SubstitutionSpecError: If a token is not exactly two characters
    """
    replacements = {}
    for token in tokens:
        if len(token) != 2:
            raise SubstitutionSpecError(f"Malformed substitution argument: {token}")
        replacements[token[0]] = token[1]
    return replacements
