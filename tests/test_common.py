"""
Тесты для проверки типов, наличия полей, URL и сериализации формы
"""
import pytest

from pets_client.pets_service.common import UNSET, form_parse, is_set, only_setted, url, verify
from pets_client.pets_service.errors import (
    InvalidType,
    MissingRequiredValue,
    UndefinedRequiredData,
)
from pets_client.pets_service.validators import PetPhoto


def test_verify_returns_default_for_absent_value():
    """Отсутствующее значение заменяется значением по умолчанию"""
    assert verify(UNSET, "number", 10) == 10
    assert verify(None, "string", "x") == "x"
    assert verify(UNSET, "string", None) is None


def test_verify_missing_without_default():
    """Без значения по умолчанию отсутствующее значение - ошибка"""
    with pytest.raises(MissingRequiredValue):
        verify(UNSET, "string")
    # MissingRequiredValue - частный случай UndefinedRequiredData
    with pytest.raises(UndefinedRequiredData):
        verify(None, "number")


def test_verify_wrong_type_ignores_default():
    """Неверный тип - ошибка даже при наличии значения по умолчанию"""
    with pytest.raises(InvalidType) as exc:
        verify("10", "number", 10)
    assert exc.value.expected == "number"
    assert exc.value.actual == "string"


def test_verify_does_not_coerce():
    """Значение возвращается без преобразования"""
    assert verify("5", "string") == "5"
    assert verify(2.5, "number") == 2.5


def test_verify_bool_is_not_number():
    with pytest.raises(InvalidType):
        verify(True, "number")
    assert verify(False, "boolean") is False


def test_verify_object():
    photo = PetPhoto(name="a.png", content=b"", type="image/png")
    assert verify(photo, "object") is photo
    assert verify({"type": "image/png"}, "object") == {"type": "image/png"}
    with pytest.raises(InvalidType):
        verify("image.png", "object")


def test_only_setted():
    assert only_setted("") is True
    assert only_setted(0) is True
    assert only_setted(None) is False
    assert only_setted(UNSET) is False


def test_is_set_reports_all_missing_fields():
    """Одна ошибка со всеми недостающими полями"""
    with pytest.raises(UndefinedRequiredData) as exc:
        is_set(pet_name="Toby", owner_email=UNSET, details=None)
    assert exc.value.fields == ["owner_email", "details"]
    assert "owner_email, details" in str(exc.value)


def test_is_set_passes_when_all_present():
    is_set(pet_name="Toby", details="", page=0)


def test_url_skips_absent_params():
    assert url("/pets", {"limit": 5, "origin": None, "page": UNSET}) == "/pets?limit=5"
    assert url("/pets", {"limit": None}) == "/pets"
    assert url("/pets") == "/pets"


def test_url_encodes_values():
    assert url("/pets/search", {"q": "perro marrón", "limit": 10}) == (
        "/pets/search?q=perro+marr%C3%B3n&limit=10"
    )


def test_form_parse_splits_files_and_fields():
    photo = PetPhoto(name="dog.png", content=b"png", type="image/png")
    body = form_parse(
        {"pet_name": "Toby", "found": True, "pet_race": None, "pet_photo_0": photo}
    )
    assert body.data == {"pet_name": "Toby", "found": "true"}
    assert body.files == {"pet_photo_0": ("dog.png", b"png", "image/png")}
