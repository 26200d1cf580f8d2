# Константы для тестирования
TEST_PASSWORD = "password"
PUBLIC_USER_FIELDS = {"id", "firstName", "lastName", "joinDate"}
SECRET_FIELDS = {"email", "pass_hash", "passHash", "password"}


def signup_payload(**overrides) -> dict:
    payload = {
        "email": "new_user@example.com",
        "password": "secret1",
        "passwordConf": "secret1",
        "firstName": "Ann",
        "lastName": "Lee",
    }
    payload.update(overrides)
    return payload


def assert_no_secrets(data: dict):
    assert not SECRET_FIELDS & set(data)
