"""Tests for lexicon file resolution and log level parsing in config."""

from srt_normalizer import config


class TestResolveLexiconPath:
    """Precedence: explicit > environment > default-lexicon.txt > none."""

    def test_explicit_wins(self, monkeypatch, tmp_path):
        monkeypatch.setattr(config, "LEXICON_PATH", "/env/terms.txt")
        assert config.resolve_lexicon_path("mine.txt", cwd=tmp_path).name == "mine.txt"

    def test_environment(self, monkeypatch, tmp_path):
        monkeypatch.setattr(config, "LEXICON_PATH", "/env/terms.txt")
        assert config.resolve_lexicon_path(cwd=tmp_path).name == "terms.txt"

    def test_default_file_in_cwd(self, monkeypatch, tmp_path):
        monkeypatch.setattr(config, "LEXICON_PATH", None)
        (tmp_path / "default-lexicon.txt").write_text("SVT\n", encoding="utf-8")
        assert config.resolve_lexicon_path(cwd=tmp_path) == tmp_path / "default-lexicon.txt"

    def test_nothing_to_load(self, monkeypatch, tmp_path):
        monkeypatch.setattr(config, "LEXICON_PATH", None)
        assert config.resolve_lexicon_path(cwd=tmp_path) is None


class TestReadLogLevel:
    """SRT_NORMALIZER_LOG_LEVEL handling."""

    def test_default(self, monkeypatch):
        monkeypatch.delenv("SRT_NORMALIZER_LOG_LEVEL", raising=False)
        assert config.read_log_level() == "INFO"

    def test_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("SRT_NORMALIZER_LOG_LEVEL", " debug ")
        assert config.read_log_level() == "DEBUG"

    def test_unknown_value_falls_back_to_info(self, monkeypatch):
        monkeypatch.setenv("SRT_NORMALIZER_LOG_LEVEL", "verbose")
        assert config.read_log_level() == "INFO"
