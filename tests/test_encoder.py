"""Tests for the Codice Fiscale encoder.

Tests cover:
- Known persons (male, female, foreign-born)
- Surname and name letter rules
- Birthplace lookup by name, code, accents
- Birthdate input shapes
- Missing / invalid input
"""

from __future__ import annotations

import json
from datetime import date, datetime
from pathlib import Path
from typing import Any

import pytest

from codice_fiscale.encoder import Encoder, encode, resolve_birthdate
from codice_fiscale.errors import InvalidBirthdateError, MissingDataError
from codice_fiscale.places import PlaceDirectory, load_places
from codice_fiscale.schemas.tax_code import Gender, PersonalData, PlaceRecord


def _person(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "surname": "Rossi",
        "name": "Mario",
        "gender": "M",
        "birthdate": "1980-01-01",
        "birthplace": "Milano",
    }
    data.update(overrides)
    return data


class TestEncodeKnownCodes:
    def test_mario_rossi(self) -> None:
        assert encode(_person()) == "RSSMRA80A01F205X"

    def test_female_adds_40_to_day(self) -> None:
        male = encode(_person())
        female = encode(_person(gender="F"))
        assert female == "RSSMRA80A41F205B"
        assert female[:9] == male[:9]
        assert int(female[9:11]) == int(male[9:11]) + 40
        assert female[11:15] == male[11:15]

    def test_maria_rossi(self) -> None:
        code = encode(_person(name="Maria", gender="F", birthdate="1985-06-12"))
        assert code == "RSSMRA85H52F205C"

    def test_marco_bianchi(self) -> None:
        code = encode(
            _person(surname="Bianchi", name="Marco", birthdate="1990-03-15", birthplace="Roma")
        )
        assert code == "BNCMRC90C15H501W"

    def test_foreign_birthplace(self) -> None:
        assert encode(_person(birthplace="Francia")) == "RSSMRA80A01Z110B"

    def test_deterministic(self) -> None:
        assert encode(_person()) == encode(_person())

    def test_personal_data_input(self) -> None:
        data = PersonalData(
            surname="Rossi",
            name="Mario",
            gender=Gender.MALE,
            birthdate=date(1980, 1, 1),
            birthplace="Milano",
        )
        assert encode(data) == "RSSMRA80A01F205X"


class TestSurnameAndName:
    def test_surname_padded_with_vowels_then_x(self) -> None:
        assert Encoder(_person(surname="Fo")).encode_surname() == "FOX"
        assert Encoder(_person(surname="Ng")).encode_surname() == "NGX"

    def test_surname_vowels_fill(self) -> None:
        assert Encoder(_person(surname="Bua")).encode_surname() == "BUA"

    def test_surname_with_spaces_and_apostrophe(self) -> None:
        assert Encoder(_person(surname="D'Amico")).encode_surname() == "DMC"
        assert Encoder(_person(surname="De Rossi")).encode_surname() == "DRS"

    def test_name_with_three_consonants(self) -> None:
        assert Encoder(_person(name="Marco")).encode_name() == "MRC"

    def test_name_with_more_consonants_drops_second(self) -> None:
        assert Encoder(_person(name="Gianfranco")).encode_name() == "GFR"
        assert Encoder(_person(name="Alberto")).encode_name() == "LRT"

    def test_name_with_few_consonants(self) -> None:
        assert Encoder(_person(name="Luca")).encode_name() == "LCU"
        assert Encoder(_person(name="Ugo")).encode_name() == "GUO"

    def test_accented_name(self) -> None:
        assert Encoder(_person(name="Nicolò")).encode_name() == "NCL"


class TestBirthplace:
    def test_by_code(self) -> None:
        assert encode(_person(birthplace="F205")) == "RSSMRA80A01F205X"

    def test_by_lowercase_code(self) -> None:
        assert encode(_person(birthplace="f205")) == "RSSMRA80A01F205X"

    def test_accents_ignored(self) -> None:
        assert encode(_person(birthplace="Forli"))[11:15] == "D704"
        assert encode(_person(birthplace="FORLÌ"))[11:15] == "D704"

    def test_unknown(self) -> None:
        with pytest.raises(MissingDataError, match="no code found"):
            encode(_person(birthplace="Atlantide"))

    def test_injected_directory(self) -> None:
        places = PlaceDirectory.from_records([PlaceRecord(name="Atlantide", code="F205")])
        assert encode(_person(birthplace="Atlantide"), places=places) == "RSSMRA80A01F205X"

    def test_directory_from_reference_file(self, tmp_path: Path) -> None:
        """Municipalities outside the bundled subset resolve from a full table."""
        path = tmp_path / "comuni.json"
        path.write_text(json.dumps({"places": [{"name": "Vigevano", "code": "L872"}]}), encoding="utf-8")
        places = PlaceDirectory.from_records(load_places(path))
        assert encode(_person(birthplace="Vigevano"), places=places)[11:15] == "L872"


class TestBirthdate:
    def test_date_object(self) -> None:
        assert encode(_person(birthdate=date(1980, 1, 1))) == "RSSMRA80A01F205X"

    def test_datetime_object(self) -> None:
        assert encode(_person(birthdate=datetime(1980, 1, 1, 12, 30))) == "RSSMRA80A01F205X"

    def test_italian_format(self) -> None:
        assert encode(_person(birthdate="01/01/1980")) == "RSSMRA80A01F205X"

    def test_all_months(self) -> None:
        letters = [encode(_person(birthdate=date(1980, m, 1)))[8] for m in range(1, 13)]
        assert "".join(letters) == "ABCDEHLMPRST"

    def test_resolve_birthdate(self) -> None:
        assert resolve_birthdate("1980-01-31") == date(1980, 1, 31)
        assert resolve_birthdate("31.01.1980") == date(1980, 1, 31)

    def test_unparsable(self) -> None:
        with pytest.raises(InvalidBirthdateError, match="not a valid date"):
            encode(_person(birthdate="yesterday"))

    def test_impossible_date(self) -> None:
        with pytest.raises(InvalidBirthdateError):
            encode(_person(birthdate="1980-02-30"))


class TestMissingData:
    @pytest.mark.parametrize("field", ["surname", "name", "gender", "birthdate", "birthplace"])
    def test_blank_field(self, field: str) -> None:
        with pytest.raises(MissingDataError, match=f"missing {field}"):
            encode(_person(**{field: ""}))

    def test_absent_field(self) -> None:
        data = _person()
        del data["birthplace"]
        with pytest.raises(MissingDataError, match="missing birthplace"):
            encode(data)

    def test_none_field(self) -> None:
        with pytest.raises(MissingDataError):
            encode(_person(surname=None))

    def test_invalid_gender(self) -> None:
        with pytest.raises(MissingDataError, match="invalid gender"):
            encode(_person(gender="X"))

    def test_lowercase_gender(self) -> None:
        assert encode(_person(gender="f")) == "RSSMRA80A41F205B"

    @pytest.mark.parametrize("field", ["surname", "name", "birthplace"])
    def test_blank_field_in_personal_data(self, field: str) -> None:
        values: dict[str, Any] = {
            "surname": "Rossi",
            "name": "Mario",
            "gender": Gender.MALE,
            "birthdate": date(1980, 1, 1),
            "birthplace": "Milano",
        }
        values[field] = "   "
        with pytest.raises(MissingDataError, match=f"missing {field}"):
            encode(PersonalData(**values))
