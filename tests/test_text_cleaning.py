"""
Tests for markup stripping and row cleaning.
"""
import pytest

from text_cleaning import (
    clean_cell,
    clean_header_string,
    clean_integer_or_double_string,
    clean_row,
    coerce_numeric,
    remove_html_tags,
    remove_wiki_citation_links,
    sanitize,
)

CHINA_CELL = (
    '<span class="flagicon"><img alt="" src="//upload.wikimedia.org/wikipedia/commons/thumb/f/fa/'
    'Flag_of_the_People%27s_Republic_of_China.svg/23px-Flag_of_the_People%27s_Republic_of_China.svg.png" '
    'decoding="async" class="thumbborder" width="23" height="15"></span>&nbsp;'
    '<a href="/wiki/Demographics_of_China" title="Demographics of China">China</a>'
    '<sup id="cite_ref-4" class="reference"><a href="#cite_note-4">[b]</a></sup>'
)


class TestRemoveHtmlTags:

    def test_flag_and_country(self):
        assert remove_html_tags(CHINA_CELL) == "China[b]"

    def test_line_breaks_become_spaces(self):
        assert remove_html_tags("Country<br>(or dependent territory)") == "Country (or dependent territory)"

    def test_non_breaking_space_character(self):
        assert remove_html_tags("1\xa0Jul\xa02018") == "1 Jul 2018"

    @pytest.mark.parametrize("raw", ["a<br>b", "a<br/>b", "a<br />b", "a<BR>b"])
    def test_every_line_break_form(self, raw):
        assert remove_html_tags(raw) == "a b"

    def test_self_closing_tags(self):
        assert remove_html_tags('<img src="x.png"/>Text<br/>') == "Text"

    @pytest.mark.parametrize("raw", [
        CHINA_CELL,
        "  padded  ",
        "&nb<i>sp;x",
        "<<b>>nested",
        "a < b",
        "",
    ])
    def test_sanitize_is_idempotent(self, raw):
        once = sanitize(raw)
        assert sanitize(once) == once


class TestRemoveWikiCitationLinks:

    @pytest.mark.parametrize("raw", ["China[b]", "China[B]", "China[1]", "China[1000]", "China[note1]"])
    def test_citations_removed(self, raw):
        assert remove_wiki_citation_links(raw) == "China"

    def test_multiple_citations(self):
        assert remove_wiki_citation_links("Estimate[4][b]") == "Estimate"

    def test_other_brackets_kept(self):
        assert remove_wiki_citation_links("[citation needed]") == "[citation needed]"


def test_clean_integer_or_double_string():
    assert clean_integer_or_double_string("18.0%") == "18.0"
    assert clean_integer_or_double_string("1,402,843,280") == "1402843280"


def test_clean_header_string():
    header = 'Member state<sup class="reference"><a href="#cite_note-4">[4]</a></sup>'
    assert clean_header_string(header) == "Member state"


class TestCoerceNumeric:

    @pytest.mark.parametrize("text, expected", [
        ("187", 187),
        ("-42", -42),
        ("+7", 7),
        ("9223372036854775807", 9223372036854775807),
    ])
    def test_integers(self, text, expected):
        value = coerce_numeric(text)
        assert isinstance(value, int)
        assert value == expected

    @pytest.mark.parametrize("text", ["10.1", "0.000712", ".5", "5.", "1e5", "-2.5E-3", "9223372036854775808"])
    def test_floats(self, text):
        assert isinstance(coerce_numeric(text), float)

    @pytest.mark.parametrize("text", ["", " 1", "1 ", "1_000", "inf", "NaN", "abc", "1.2.3", "e5", None])
    def test_not_numbers(self, text):
        assert coerce_numeric(text) is None


class TestCleanRow:

    def test_population_row(self):
        row = [
            "187",
            '<span class="flagicon"><img alt="" src="//upload.wikimedia.org/flag.png" width="23" height="12"></span>'
            '&nbsp;<a href="/wiki/Demographics_of_Marshall_Islands" class="mw-redirect">Marshall Islands</a>',
            "55,500",
            '<span data-sort-value="6996712478476410351♠" style="display:none"></span>0.000712%',
            '<span data-sort-value="000000002018-07-01-0000" style="white-space:nowrap">1 Jul 2018</span>',
            'National annual estimate<sup id="cite_ref-auto1_104-6" class="reference">'
            '<a href="#cite_note-auto1-104">[90]</a></sup>',
        ]
        expected = [
            "187",
            "'Marshall Islands'",
            "55500",
            "0.000712",
            "'1 Jul 2018'",
            "'National annual estimate'",
        ]
        assert clean_row(row) == expected

    def test_tags_and_commas_removed(self):
        assert clean_row(["187", "<span>flag</span>China", "55,500"]) == ["187", "'flagChina'", "55500"]
        assert clean_row(["187", "<span></span>China", "55,500"]) == ["187", "'China'", "55500"]

    def test_apostrophes_are_doubled(self):
        assert clean_cell("O'Brien") == "'O''Brien'"
        assert clean_cell("<a href='/wiki/x'>Côte d'Ivoire</a>") == "'Côte d''Ivoire'"

    def test_text_keeps_commas_and_percent(self):
        assert clean_cell("Paris, France") == "'Paris, France'"
        assert clean_cell("about 5%ish") == "'about 5%ish'"

    def test_number_with_citation(self):
        assert clean_cell("1,000[3]") == "1000"

    def test_empty_cell_is_empty_text(self):
        assert clean_cell("") == "''"

    def test_empty_row(self):
        assert clean_row([]) == []
