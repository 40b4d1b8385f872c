from __future__ import annotations


class ReportError(Exception):
    pass


class ConfigError(ReportError, ValueError):
    pass


class ParseError(ConfigError):
    def __init__(self, message: str, text: str) -> None:
        super().__init__(message)
        self.text = text


class OutputError(ReportError, OSError):
    pass
