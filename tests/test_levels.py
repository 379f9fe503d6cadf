"""Testes do registro de níveis e da decisão de limiar."""

from __future__ import annotations

import itertools

import pytest

from sinklog import LogLevel, ValidationError, attributes_of, should_emit

ORDERED = [
    LogLevel.VERBOSE,
    LogLevel.DEBUG,
    LogLevel.INFO,
    LogLevel.WARNING,
    LogLevel.ERROR,
    LogLevel.FATAL,
    LogLevel.FIXED,
]


@pytest.mark.parametrize("threshold", list(LogLevel))
def test_fixed_sempre_passa(threshold: LogLevel):
    assert should_emit(LogLevel.FIXED, threshold)


@pytest.mark.parametrize("threshold", list(LogLevel))
def test_monotonicidade(threshold: LogLevel):
    """Se um nível passa, qualquer nível de rank maior também passa."""
    for lower, higher in itertools.combinations(ORDERED, 2):
        assert attributes_of(lower).rank < attributes_of(higher).rank
        if should_emit(lower, threshold):
            assert should_emit(higher, threshold)


def test_limiar_fixed_so_deixa_fixed():
    passing = [level for level in LogLevel if should_emit(level, LogLevel.FIXED)]
    assert passing == [LogLevel.FIXED]


def test_limiar_error():
    assert not should_emit(LogLevel.INFO, LogLevel.ERROR)
    assert should_emit(LogLevel.ERROR, LogLevel.ERROR)
    assert should_emit(LogLevel.FATAL, LogLevel.ERROR)


def test_atributos_estaticos():
    attrs = attributes_of(LogLevel.WARNING)
    assert attrs.label == "WARNING"
    assert attrs.color == "bright_yellow"
    assert attrs.icon == "⚠️"
    assert attributes_of(LogLevel.INFO).label == "   INFO"
    assert {len(attributes_of(level).label) for level in LogLevel} == {7}
    assert LogLevel.FATAL.rank == 5


def test_parse():
    assert LogLevel.parse("warning") is LogLevel.WARNING
    assert LogLevel.parse(" Fatal ") is LogLevel.FATAL
    assert LogLevel.parse(LogLevel.DEBUG) is LogLevel.DEBUG
    with pytest.raises(ValidationError):
        LogLevel.parse("trace")
    with pytest.raises(ValidationError):
        LogLevel.parse(3)
