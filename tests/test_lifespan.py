from __future__ import annotations

from gedcom_relations.registry import Fact, Person
from gedcom_relations.relationships import extract_year, format_lifespan, format_years


def test_extract_year_from_full_date():
    assert extract_year("12 MAR 1850") == "1850"


def test_extract_year_with_qualifier():
    assert extract_year("ABT 1855") == "1855"
    assert extract_year("BET 1800 AND 1810") == "1800"


def test_extract_year_ignores_implausible_numbers():
    assert extract_year("3 JUN 0950") == ""
    assert extract_year("Unknown") == ""


def test_extract_year_handles_missing_text():
    assert extract_year(None) == ""
    assert extract_year("") == ""


def test_format_years_both():
    assert format_years("1850", "1920") == "1850 – 1920"


def test_format_years_birth_only_keeps_trailing_space():
    assert format_years("1850", "") == "1850 – "


def test_format_years_death_only():
    assert format_years("", "1920") == "? – 1920"


def test_format_years_neither():
    assert format_years("", "") == ""


def test_format_lifespan_from_person():
    person = Person(
        id="@I1@",
        birth=Fact(date="12 MAR 1850", place="Springfield"),
        death=Fact(date="3 JUN 1920"),
    )

    assert format_lifespan(person) == "1850 – 1920"


def test_format_lifespan_without_dates():
    assert format_lifespan(Person(id="@I1@")) == ""
    assert format_lifespan(Person(id="@I1@", birth=Fact(place="Springfield"))) == ""
    assert format_lifespan(None) == ""
