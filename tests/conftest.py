import os
from collections.abc import Callable
from typing import Any

import pytest

from ringo.ringo_ast import Program
from ringo.ringo_lexer import CharacterStream, Lexer, Token
from ringo.ringo_parser import Parser

# Monkeypatch coverage to bypass teardown crash in act/docker
if os.getenv("COVERAGE_PROCESS_START"):
    import coverage

    coverage.process_startup()

    import coverage.collector

    def safe_stop(self: Any) -> None:
        if self in getattr(self, "_collectors", []):
            self._collectors.remove(self)

    coverage.collector.Collector.stop = safe_stop


@pytest.fixture  # type: ignore[misc]
def tokenize() -> Callable[[str], list[Token]]:
    def _tokenize(source: str) -> list[Token]:
        return Lexer(CharacterStream(source, 0, 1, 1)).tokenize()

    return _tokenize


@pytest.fixture  # type: ignore[misc]
def parse_source() -> Callable[[str], Program]:
    def _parse(source: str) -> Program:
        return Parser(Lexer(source)).parse()

    return _parse
