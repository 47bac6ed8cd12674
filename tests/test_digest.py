"""Tests for core/digest.py"""

import pytest

from rule_cracker.core.digest import DigestFunction, normalize_algorithm
from rule_cracker.utils.exceptions import UnknownAlgorithmError

ABC_SHA256 = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
ABC_MD5 = "900150983cd24fb0d6963f7d28e17f72"


@pytest.mark.parametrize("name, expected", [
    ("sha256", "sha256"),
    ("SHA-256", "sha256"),
    ("MD5", "md5"),
    ("SHA-1", "sha1"),
    ("SHA3-256", "sha3_256"),
])
def test_normalize_algorithm(name, expected):
    assert normalize_algorithm(name) == expected


def test_unknown_algorithm():
    with pytest.raises(UnknownAlgorithmError, match="Unknown algorithm 'rot13'"):
        DigestFunction("rot13")


def test_variable_length_algorithm_is_rejected():
    with pytest.raises(UnknownAlgorithmError, match="no fixed digest length"):
        DigestFunction("shake_128")


def test_hexdigest():
    assert DigestFunction("SHA-256").hexdigest("abc") == ABC_SHA256
    assert DigestFunction("md5").hexdigest("abc") == ABC_MD5


def test_algorithm_listed_but_not_constructible(monkeypatch):
    def refuse(name, data=b""):
        raise ValueError(f"unsupported hash type {name}")

    monkeypatch.setattr("rule_cracker.core.digest.hashlib.new", refuse)
    with pytest.raises(UnknownAlgorithmError, match="not usable"):
        DigestFunction("sha256")
