"""
Custom exceptions for the Rule Cracker.
"""

class RuleCrackerError(Exception):
    """Base exception for rule cracker errors"""
    pass


class InputFileError(RuleCrackerError):
    """Input file missing or unusable"""
    pass


class MalformedTargetError(RuleCrackerError):
    """Line in the target file is not of the form identifier:digest"""
    pass


class RuleSyntaxError(RuleCrackerError):
    """Rule segment does not match any known command"""

    def __init__(self, command: str, line_number: int = None):
        self.command = command
        self.line_number = line_number
        location = f" on line {line_number}" if line_number is not None else ""
        super().__init__(f"Unknown rule '{command}'{location}")


class WordSourceError(RuleCrackerError):
    """Word file could not be opened or read"""
    pass


class UnknownAlgorithmError(RuleCrackerError):
    """Digest algorithm not available"""
    pass


class SubstitutionSpecError(RuleCrackerError):
    """Substitution argument is not exactly two characters"""
    pass


class OutputSinkError(RuleCrackerError):
    """Error appending a match to the output file"""
    pass


class ConfigError(RuleCrackerError):
    """Error in configuration"""
    pass
