"""
Shared pytest fixtures for rule_cracker tests.
"""

import hashlib
from pathlib import Path
from typing import Callable, List

import pytest

from rule_cracker.core.digest import DigestFunction
from rule_cracker.core.pipeline import MatchSink
from rule_cracker.core.registry import TargetRegistry
from rule_cracker.utils.logger import Logger


def sha256_hex(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


class RecordingSink(MatchSink):
    """MatchSink that records every candidate instead of hashing it"""

    def __init__(self, stop_after: int = None):
        super().__init__(TargetRegistry(), DigestFunction("sha256"))
        self.seen: List[str] = []
        self.stop_after = stop_after

    def check(self, candidate: str) -> bool:
        self.seen.append(candidate)
        self.tested += 1
        return self.stop_after is not None and len(self.seen) >= self.stop_after


@pytest.fixture
def quiet_logger():
    """Logger without console output"""
    return Logger(name="rule_cracker.tests", console=False).get_logger()


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[..., Path]:
    """Write text to a file under tmp_path and return its path"""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
