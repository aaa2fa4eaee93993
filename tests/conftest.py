"""
Фикстуры для тестов клиента
"""
import pytest

from pets_client.pets_service.pets_client import PetsClient
from pets_client.pets_service.validators import PetPhoto


class RecordingTransport:
    """Транспорт-заглушка: запоминает вызовы и возвращает заданный конверт"""

    def __init__(self, response=None):
        self.response = response if response is not None else {"details": {}}
        self.calls = []

    async def get(self, url):
        self.calls.append(("GET", url, None))
        return self.response

    async def post(self, url, body):
        self.calls.append(("POST", url, body))
        return self.response

    async def put(self, url, body):
        self.calls.append(("PUT", url, body))
        return self.response

    async def delete(self, url):
        self.calls.append(("DELETE", url, None))
        return self.response


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def client(transport):
    return PetsClient(token="test-token", transport=transport)


@pytest.fixture
def photo():
    return PetPhoto(name="dog.jpg", content=b"\xff\xd8\xff", type="image/jpeg")


@pytest.fixture
def pet_data(photo):
    """Минимальный корректный набор полей для создания публикации"""
    return {
        "pet_animal": "dog",
        "pet_name": "Toby",
        "disappearance_date": "2024-03-15T14:30",
        "disappearance_place": "40.4168,-3.7038",
        "details": "Collar rojo",
        "pet_photo_0": photo,
        "owner_name": "Ana",
        "owner_phone": "600123456",
        "owner_email": "ana@petmail.org",
    }
