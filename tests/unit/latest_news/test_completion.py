"""Tests for latest_news.completion module."""

from latest_news.completion import (
    BASH_COMPLETION_FILENAME,
    build_completion_script,
    write_completion_file,
)


class TestBuildCompletionScript:
    def test_lists_source_commands(self) -> None:
        script = build_completion_script("latest", ["hn", "lobsters"])
        assert 'compgen -W "hn lobsters"' in script
        assert "hn|lobsters) sub=" in script
        assert "complete -F _latest latest" in script

    def test_includes_flags(self) -> None:
        script = build_completion_script("latest", ["hn"])
        assert "--gen-autocomplete" in script
        assert "--open" in script

    def test_no_sources_still_valid_case(self) -> None:
        script = build_completion_script("latest", [])
        assert "__no_sources__) sub=" in script

    def test_function_name_is_sanitised(self) -> None:
        script = build_completion_script("latest-news", ["hn"])
        assert "_latest_news()" in script


class TestWriteCompletionFile:
    def test_writes_file(self, tmp_path) -> None:
        path = write_completion_file("latest", ["hn"], tmp_path / BASH_COMPLETION_FILENAME)
        assert path.exists()
        assert "complete -F _latest latest" in path.read_text()
