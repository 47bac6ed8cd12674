"""
Target registry and result persistence for the Rule Cracker.

The registry holds every still-unsolved digest. It is loaded once, only ever
shrinks, and an empty registry means the whole run is done.
"""

import os
from typing import Dict, Iterable, List, Optional, Tuple

from rule_cracker.utils.exceptions import InputFileError, MalformedTargetError, OutputSinkError


class TargetRegistry:
    """Mapping of unsolved digest -> identifier"""

    def __init__(self, targets: Optional[Dict[str, str]] = None):
        """Initialize with an optional digest -> identifier mapping"""
        self._targets: Dict[str, str] = {}
        for digest, identifier in (targets or {}).items():
            self._targets[digest.strip().lower()] = identifier
        self.total = len(self._targets)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "TargetRegistry":
        """Parse identifier:digest lines

        Fields after the second are ignored and a repeated digest keeps the
        last identifier. A blank line is malformed.

        Raises:
            MalformedTargetError: If a line has fewer than two fields
        """
        targets = {}
        for line_number, line in enumerate(lines, 1):
            line = line.strip()
            parts = line.split(":")
            if len(parts) < 2:
                raise MalformedTargetError(
                    f"Malformed line {line_number} in input file: {parts[0]}"
                )
            targets[parts[1]] = parts[0].strip()
        return cls(targets)

    @classmethod
    def load(cls, path: str) -> "TargetRegistry":
        """Load targets from a file of identifier:digest lines"""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return cls.from_lines(f)
        except (OSError, UnicodeDecodeError) as e:
            raise InputFileError(f"Couldn't read from input file: {e}")

    def claim(self, digest: str) -> Optional[str]:
        """Remove a solved digest and return its identifier, or None if unknown"""
        return self._targets.pop(digest, None)

    def is_empty(self) -> bool:
        return not self._targets

    @property
    def solved_count(self) -> int:
        return self.total - len(self._targets)

    def unsolved(self, limit: Optional[int] = None) -> List[Tuple[str, str]]:
        """List up to ``limit`` unsolved (identifier, digest) pairs"""
        pairs = [(identifier, digest) for digest, identifier in self._targets.items()]
        return pairs if limit is None else pairs[:limit]

    def __len__(self) -> int:
        return len(self._targets)

    def __contains__(self, digest: str) -> bool:
        return digest in self._targets


class ResultWriter:
    """Appends solved pairs to the output file"""

    def __init__(self, output_path: str):
        """Initialize with the output file path"""
        self.output_path = output_path

    def append(self, identifier: str, plaintext: str) -> None:
        """Append one 'identifier : plaintext' line

        Raises:
            OutputSinkError: If the file cannot be written
        """
        try:
            output_dir = os.path.dirname(self.output_path)
            if output_dir:
                os.makedirs(output_dir, exist_ok=True)
            with open(self.output_path, 'a', encoding='utf-8', errors='surrogateescape') as f:
                f.write(f"{identifier} : {plaintext}\n")
        except OSError as e:
            raise OutputSinkError(f"Couldn't write to output file: {e}")
