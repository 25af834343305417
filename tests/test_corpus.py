"""Tests for line corpus extraction from saved pages."""

import gzip
from pathlib import Path

import pytest

from standings.corpus import (
    is_html_path,
    lines_from_html,
    load_corpus,
    normalize_lines,
    read_page,
)
from standings.exceptions import CorpusError
from standings.parser import parse_standings

DATA_DIR = Path(__file__).resolve().parent / "data"


class TestNormalizeLines:
    def test_collapses_whitespace(self):
        assert normalize_lines("  1   THW\tKiel  \n") == ["1 THW Kiel"]

    def test_drops_blank_lines(self):
        assert normalize_lines("a\n\n   \nb") == ["a", "b"]

    def test_crlf(self):
        assert normalize_lines("a\r\nb\r\n") == ["a", "b"]


class TestLinesFromHtml:
    def test_body_text_only(self):
        html = "<html><head><title>Tabelle</title></head><body>\nHallo\n</body></html>"
        assert lines_from_html(html) == ["Hallo"]

    def test_script_and_style_removed(self):
        lines = lines_from_html((DATA_DIR / "tabelle.html").read_text(encoding="utf-8"))
        assert not any("var teaser" in line for line in lines)
        assert not any("window.ads" in line for line in lines)
        assert not any("color: red" in line for line in lines)

    def test_rows_survive(self):
        lines = lines_from_html((DATA_DIR / "tabelle.html").read_text(encoding="utf-8"))
        assert "1 SG Flensburg-Handewitt 10 8 2 0 366:297 69 18:2" in lines
        assert "3 THW Kiel 10 7 2 1 310:270 +40 16:4 16:4" in lines


class TestReadPage:
    def test_plain(self, tmp_path):
        path = tmp_path / "page.txt"
        path.write_text("Füchse", encoding="utf-8")
        assert read_page(path) == "Füchse"

    def test_gzip(self, tmp_path):
        path = tmp_path / "page.html.gz"
        path.write_bytes(gzip.compress("<p>Löwen</p>".encode("utf-8")))
        assert read_page(path) == "<p>Löwen</p>"

    def test_missing(self, tmp_path):
        with pytest.raises(CorpusError) as exc_info:
            read_page(tmp_path / "nope.html")
        assert exc_info.value.path.endswith("nope.html")

    def test_corrupt_gzip(self, tmp_path):
        path = tmp_path / "page.html.gz"
        path.write_bytes(b"not gzip at all")
        with pytest.raises(CorpusError):
            read_page(path)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "page.txt"
        path.write_bytes("Füchse".encode("utf-16"))
        with pytest.raises(CorpusError):
            read_page(path)


class TestIsHtmlPath:
    @pytest.mark.parametrize("name,expected", [
        ("tabelle.html", True),
        ("tabelle.HTM", True),
        ("tabelle.html.gz", True),
        ("tabelle.txt", False),
        ("tabelle.txt.gz", False),
        ("tabelle", False),
    ])
    def test_suffixes(self, name, expected):
        assert is_html_path(name) is expected


class TestLoadCorpus:
    def test_html_sample_parses(self):
        records = parse_standings(load_corpus(DATA_DIR / "tabelle.html"))
        assert [r.team for r in records] == [
            "SG Flensburg-Handewitt",
            "SC Magdeburg",
            "THW Kiel",
            "Füchse Berlin",
        ]
        # the row hidden in <script> must not leak in
        assert records[1].played == 10

    def test_text_sample(self):
        lines = load_corpus(DATA_DIR / "tabelle.txt")
        assert "12 Hannover-Burgdorf 10 3 1 6 281:300 -19 7:13" in lines

    def test_gzipped_text(self, tmp_path):
        text = (DATA_DIR / "tabelle.txt").read_bytes()
        path = tmp_path / "tabelle.txt.gz"
        path.write_bytes(gzip.compress(text))
        assert load_corpus(path) == load_corpus(DATA_DIR / "tabelle.txt")
