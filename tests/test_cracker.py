"""Tests for core/cracker.py"""

from conftest import sha256_hex
from rule_cracker.core.cracker import CrackResult, HashCracker
from rule_cracker.core.registry import TargetRegistry
from rule_cracker.core.rules import parse_rule, parse_rules


def make_cracker(targets, tmp_path, logger, **kwargs):
    registry = TargetRegistry({sha256_hex(text): name for name, text in targets.items()})
    kwargs.setdefault("show_progress", False)
    return HashCracker(registry, "sha256", output_path=str(tmp_path / "output.txt"),
                       logger=logger, **kwargs)


class TestHashCracker:

    def test_word_file_with_digit_suffix(self, tmp_path, write_file, quiet_logger):
        words = write_file("words.txt", "cat\ndog\n")
        cracker = make_cracker({"alice": "cat123"}, tmp_path, quiet_logger)
        rules = parse_rules([
            f'read "{words}" | add 3 digits',
            "1 to 6 digits",
        ])

        result = cracker.crack(rules)

        assert result.all_cracked
        assert [str(m) for m in result.matches] == ["alice : cat123"]
        assert cracker.registry.is_empty()
        # cat000 .. cat123, nothing after the last target fell
        assert result.tested == 124
        assert (tmp_path / "output.txt").read_text() == "alice : cat123\n"

    def test_later_rules_are_skipped_once_everything_is_cracked(self, tmp_path, quiet_logger):
        cracker = make_cracker({"bob": "42"}, tmp_path, quiet_logger)
        rules = parse_rules(["2 to 2 digits", 'permute "abcdef"'])
        result = cracker.crack(rules)
        assert result.all_cracked
        assert result.tested == 43

    def test_exhaustion(self, tmp_path, quiet_logger):
        targets = {f"user{i}": f"secret{i}" for i in range(8)}
        targets["carol"] = "Ab"
        cracker = make_cracker(targets, tmp_path, quiet_logger)
        result = cracker.crack([parse_rule('permute "ab" | add capitalized')])

        assert not result.all_cracked
        assert result.total == 9
        assert result.remaining == 8
        assert [m.identifier for m in result.matches] == ["carol"]
        assert result.tested == 10
        lines = result.summary_lines()
        assert lines[0] == "Cracked 1 / 9 passwords."
        assert lines[1] == "Uncracked:"
        assert len(lines) == 2 + 6 + 1
        assert lines[-1] == "  And 2 more..."

    def test_multiple_rules_in_order(self, tmp_path, write_file, quiet_logger):
        words = write_file("words.txt", "summer\nwinter\n")
        cracker = make_cracker({"a": "Winter7", "b": "0042"}, tmp_path, quiet_logger)
        rules = parse_rules([
            "4 to 4 digits",
            f'read "{words}" | add capitalized | add 1 digit',
        ])
        result = cracker.crack(rules)
        assert result.all_cracked
        assert [m.plaintext for m in result.matches] == ["0042", "Winter7"]

    def test_progress_bar(self, tmp_path, quiet_logger):
        cracker = make_cracker({"bob": "nope"}, tmp_path, quiet_logger, show_progress=True)
        result = cracker.crack(parse_rules(["1 to 4 digits"]))
        assert result.tested == 11110
        assert cracker.progress_bar is None
        assert cracker.sink.progress is None

    def test_crack_with_rules_file(self, tmp_path, write_file, quiet_logger):
        rules = write_file("rules.conf", "# digits\n1 to 3 digits\n")
        cracker = make_cracker({"bob": "007"}, tmp_path, quiet_logger)
        result = cracker.crack_with_rules_file(str(rules))
        assert result.all_cracked

    def test_from_file(self, write_file, quiet_logger):
        path = write_file("input.txt", f"alice:{sha256_hex('7')}\n")
        cracker = HashCracker.from_file(str(path), logger=quiet_logger, show_progress=False)
        assert cracker.crack(parse_rules(["1 to 1 digits"])).all_cracked


class TestCrackResult:

    def test_summary_when_all_cracked(self):
        assert CrackResult(total=2, remaining=0).summary_lines() == ["Cracked 2 / 2 passwords."]

    def test_summary_without_hidden_targets(self):
        result = CrackResult(total=1, unsolved=[("alice", "abc")], remaining=1)
        assert result.summary_lines() == [
            "Cracked 0 / 1 passwords.",
            "Uncracked:",
            "  alice : abc",
        ]
