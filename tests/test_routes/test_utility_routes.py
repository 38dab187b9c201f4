import json
import re
from unittest.mock import patch


class TestHealthRoute:
    def test_health(self, client):
        response = client.get('/health')

        assert response.status_code == 200
        assert json.loads(response.data) == {"status": "ok"}


class TestEmailRoutes:
    """Tests for POST /emails/validate"""

    def test_valid_email(self, client):
        response = client.post('/emails/validate', json={"email": "User@Example.com"})

        assert response.status_code == 200
        assert json.loads(response.data) == {"email": "User@Example.com", "valid": True}

    def test_invalid_email(self, client):
        response = client.post('/emails/validate', json={"email": "user@example.c"})

        assert response.status_code == 200
        assert json.loads(response.data)["valid"] is False

    def test_non_string_email(self, client):
        response = client.post('/emails/validate', json={"email": None})

        assert response.status_code == 200
        assert json.loads(response.data) == {"email": None, "valid": False}

    def test_batch(self, client):
        response = client.post(
            '/emails/validate',
            json={"emails": ["user@example.com", "userexample.com"]}
        )

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["results"] == [
            {"email": "user@example.com", "valid": True},
            {"email": "userexample.com", "valid": False},
        ]

    def test_batch_must_be_list(self, client):
        response = client.post('/emails/validate', json={"emails": "user@example.com"})

        assert response.status_code == 400

    def test_missing_fields(self, client):
        response = client.post('/emails/validate', json={"address": "user@example.com"})

        assert response.status_code == 400
        assert "error" in json.loads(response.data)

    def test_non_json_body(self, client):
        response = client.post('/emails/validate', data="user@example.com", content_type='text/plain')

        assert response.status_code == 400


class TestPasswordRoutes:
    """Tests for POST /passwords"""

    def test_defaults_without_body(self, client):
        response = client.post('/passwords')

        assert response.status_code == 200
        data = json.loads(response.data)
        assert len(data["password"]) == 8
        assert data["length"] == 8

    def test_custom_options(self, client):
        response = client.post(
            '/passwords',
            json={"length": 30, "numbers": True, "special": False, "alphabets": False}
        )

        assert response.status_code == 200
        data = json.loads(response.data)
        assert re.fullmatch(r"[0-9]{30}", data["password"])

    def test_fallback_to_alphabets(self, client):
        response = client.post(
            '/passwords',
            json={"length": 16, "numbers": False, "special": False, "alphabets": False}
        )

        assert response.status_code == 200
        assert re.fullmatch(r"[A-Za-z]{16}", json.loads(response.data)["password"])

    def test_multiple(self, client):
        response = client.post('/passwords', json={"length": 5, "count": 4})

        assert response.status_code == 200
        data = json.loads(response.data)
        assert len(data["passwords"]) == 4

    def test_zero_length(self, client):
        response = client.post('/passwords', json={"length": 0})

        assert response.status_code == 200
        assert json.loads(response.data) == {"password": "", "length": 0}

    @patch('controllers.utility_controller.Config.PASSWORD_MAX_LENGTH', 32)
    def test_length_over_limit(self, client):
        response = client.post('/passwords', json={"length": 33})

        assert response.status_code == 400
        assert "error" in json.loads(response.data)

    def test_invalid_length_type(self, client):
        response = client.post('/passwords', json={"length": "long"})

        assert response.status_code == 400

    def test_string_flag_rejected(self, client):
        response = client.post('/passwords', json={"length": 8, "numbers": "false"})

        assert response.status_code == 400
        assert json.loads(response.data) == {"error": "numbers must be a boolean"}

    def test_null_flag_rejected(self, client):
        response = client.post('/passwords', json={"special": None})

        assert response.status_code == 400

    def test_non_object_body(self, client):
        response = client.post('/passwords', json=[1, 2, 3])

        assert response.status_code == 400
