import pytest

from advisor.config import Settings
from advisor.domain import ProfileType

NAMES = ["RESPONSE_DELAY", "RANDOM_SEED", "HOUSING_LIMIT", "STUDENT_SAVINGS_TARGET",
         "PROFESSIONAL_SAVINGS_TARGET", "LOG_LEVEL"]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    # setenv first so monkeypatch also removes whatever a .env file adds later
    for name in NAMES:
        monkeypatch.setenv("ADVISOR_" + name, "")
        monkeypatch.delenv("ADVISOR_" + name)
    empty = tmp_path / "empty.env"
    empty.write_text("")
    return str(empty)


def test_defaults(clean_env):
    settings = Settings.from_env(clean_env)
    assert settings == Settings()
    assert settings.response_delay == 1.0
    assert settings.random_seed is None
    assert settings.savings_target(ProfileType.STUDENT) == 10
    assert settings.savings_target(ProfileType.PROFESSIONAL) == 20


def test_from_env(clean_env, monkeypatch):
    monkeypatch.setenv("ADVISOR_RESPONSE_DELAY", "0.5")
    monkeypatch.setenv("ADVISOR_RANDOM_SEED", "11")
    monkeypatch.setenv("ADVISOR_HOUSING_LIMIT", "0.35")
    monkeypatch.setenv("ADVISOR_LOG_LEVEL", "debug")
    settings = Settings.from_env(clean_env)
    assert settings.response_delay == 0.5
    assert settings.random_seed == 11
    assert settings.housing_limit == 0.35
    assert settings.log_level == "DEBUG"


def test_from_dotenv_file(clean_env, monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "ADVISOR_RESPONSE_DELAY=0.2\n"
        "ADVISOR_STUDENT_SAVINGS_TARGET=15\n"
        "ADVISOR_LOG_LEVEL=warning\n"
    )
    monkeypatch.setenv("ADVISOR_RANDOM_SEED", "4")
    settings = Settings.from_env(str(env_file))
    assert settings.response_delay == 0.2
    assert settings.savings_target(ProfileType.STUDENT) == 15
    assert settings.log_level == "WARNING"
    assert settings.random_seed == 4


def test_environment_wins_over_dotenv_file(clean_env, monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("ADVISOR_RESPONSE_DELAY=3\n")
    monkeypatch.setenv("ADVISOR_RESPONSE_DELAY", "0.1")
    assert Settings.from_env(str(env_file)).response_delay == 0.1


def test_invalid_values_raise(clean_env, monkeypatch):
    monkeypatch.setenv("ADVISOR_RESPONSE_DELAY", "soon")
    with pytest.raises(ValueError, match="ADVISOR_RESPONSE_DELAY"):
        Settings.from_env(clean_env)

    monkeypatch.setenv("ADVISOR_RESPONSE_DELAY", "-1")
    with pytest.raises(ValueError):
        Settings.from_env(clean_env)

    monkeypatch.setenv("ADVISOR_RESPONSE_DELAY", "1")
    monkeypatch.setenv("ADVISOR_RANDOM_SEED", "1.5")
    with pytest.raises(ValueError, match="ADVISOR_RANDOM_SEED"):
        Settings.from_env(clean_env)


def test_invalid_log_level_names_variable(clean_env, monkeypatch):
    monkeypatch.setenv("ADVISOR_LOG_LEVEL", "LOUD")
    with pytest.raises(ValueError, match="ADVISOR_LOG_LEVEL"):
        Settings.from_env(clean_env)


def test_blank_log_level_uses_default(clean_env, monkeypatch):
    monkeypatch.setenv("ADVISOR_LOG_LEVEL", " ")
    assert Settings.from_env(clean_env).log_level == "INFO"
