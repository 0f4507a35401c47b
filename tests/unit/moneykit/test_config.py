import pytest

from moneykit.config import DEFAULT_DB_SEPARATOR, ENV_DB_SEPARATOR, MoneyKitConfig


def test_defaults():
    assert MoneyKitConfig().db_separator == DEFAULT_DB_SEPARATOR == "|"


@pytest.mark.parametrize("separator", ["", "1", "a", "-", "x|", None])
def test_rejects_ambiguous_separator(separator):
    with pytest.raises(ValueError):
        MoneyKitConfig(db_separator=separator)


def test_from_env_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv(ENV_DB_SEPARATOR, ":")

    config = MoneyKitConfig.from_env(dotenv_path=tmp_path / "missing.env")

    assert config.db_separator == ":"


def test_from_env_loads_dotenv_file(monkeypatch, tmp_path):
    # load_dotenv writes into os.environ; touching the key first lets monkeypatch restore it on teardown
    monkeypatch.setenv(ENV_DB_SEPARATOR, "placeholder")
    monkeypatch.delenv(ENV_DB_SEPARATOR)
    env_file = tmp_path / ".env"
    env_file.write_text(f"{ENV_DB_SEPARATOR}=;\n")

    config = MoneyKitConfig.from_env(dotenv_path=env_file)

    assert config.db_separator == ";"


def test_environment_wins_over_dotenv_file(monkeypatch, tmp_path):
    monkeypatch.setenv(ENV_DB_SEPARATOR, "#")
    env_file = tmp_path / ".env"
    env_file.write_text(f"{ENV_DB_SEPARATOR}=;\n")

    assert MoneyKitConfig.from_env(dotenv_path=env_file).db_separator == "#"


def test_from_env_defaults_when_unset(monkeypatch, tmp_path):
    monkeypatch.delenv(ENV_DB_SEPARATOR, raising=False)

    assert MoneyKitConfig.from_env(dotenv_path=tmp_path / "missing.env").db_separator == "|"
