import logging

import pytest

import config
import session as game_session
from generator import GameLevel, Operator


@pytest.fixture
def fresh_session(monkeypatch):
    # the process-wide session is built lazily from config on first use
    monkeypatch.setattr(game_session, "_session", None)
    return monkeypatch


def test_parse_seed():
    assert config._parse_seed(None) is None
    assert config._parse_seed("  ") is None
    assert config._parse_seed("17") == 17
    assert config._parse_seed("abc") is None


def test_parse_origins():
    assert config._parse_origins("http://a, http://b ,,") == ["http://a", "http://b"]
    assert config._parse_origins("") == []


def test_get_session_is_cached(fresh_session):
    assert game_session.get_session() is game_session.get_session()


def test_seed_makes_session_repeatable(fresh_session):
    fresh_session.setattr(config, "RANDOM_SEED", 99)
    first = game_session.get_session()
    seq1 = [first.question] + [first.next_question() for _ in range(5)]

    fresh_session.setattr(game_session, "_session", None)
    second = game_session.get_session()
    seq2 = [second.question] + [second.next_question() for _ in range(5)]

    assert first is not second
    assert seq1 == seq2


def test_configured_defaults_reach_session(fresh_session):
    fresh_session.setattr(config, "DEFAULT_OPERATOR", "/")
    fresh_session.setattr(config, "DEFAULT_LEVEL", "level3")
    s = game_session.get_session()
    assert s.operator is Operator.DIVIDE
    assert s.level is GameLevel.LEVEL3
    assert s.question.operand2 * s.question.correct_answer == s.question.operand1


def test_bad_configured_defaults_fall_back(fresh_session, caplog):
    fresh_session.setattr(config, "DEFAULT_OPERATOR", "^")
    fresh_session.setattr(config, "DEFAULT_LEVEL", "level9")
    with caplog.at_level(logging.WARNING, logger="session"):
        s = game_session.get_session()
    assert s.operator is Operator.ADD
    assert s.level is GameLevel.LEVEL1
    messages = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert any("unknown operator" in m for m in messages)
    assert any("unknown level" in m for m in messages)
