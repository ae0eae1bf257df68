"""End-to-end tests for the OAuth login and registration flow."""

from urllib.parse import parse_qs, urlparse

from atrium.adapter.github.client import GitHubOAuthClient

FRONTEND_URL = "http://localhost:3000"


class TestInitiateLogin:
    def test_returns_provider_authorization_url(self, client):
        response = client.post("/auth/oauth/github/authorize")

        assert response.status_code == 200
        url = response.json()["authorization_url"]
        assert url.startswith("https://github.com/login/oauth/authorize")
        assert "mock=true" in url

    def test_unknown_provider(self, client):
        response = client.post("/auth/oauth/myspace/authorize")

        assert response.status_code == 400
        assert response.json()["detail"] == "Unknown OAuth provider: myspace"


class TestCallback:
    def test_new_identity_gets_registration_form(self, client):
        response = client.get(
            "/auth/oauth/github/login",
            params={"code": "abc"},
            follow_redirects=False,
        )

        assert response.status_code == 200
        form = response.json()
        assert form["title"] == "Create New Account"
        assert form["action"] == "http://localhost:8000/auth/oauth/github/login"
        assert form["token"] == "mock-github-token-abc"
        assert [field["name"] for field in form["fields"]] == ["username"]
        assert "auth_token" not in response.cookies

    def test_provider_error_redirects_to_error_page(self, client):
        response = client.get(
            "/auth/oauth/github/login",
            params={"error": "access_denied"},
            follow_redirects=False,
        )

        assert response.status_code == 302
        location = urlparse(response.headers["location"])
        assert location.path == "/auth/error"
        query = parse_qs(location.query)
        assert query["error"] == ["auth_failed"]
        assert query["provider"] == ["github"]
        assert query["message"] == ["access_denied"]

    def test_email_conflict_redirects_to_error_page(
        self, client, container, register
    ):
        assert register().status_code == 303
        client.cookies.clear()

        github = client.portal.call(container.get, GitHubOAuthClient)
        github.user_info = {
            "id": 9999,
            "login": "impostor",
            "name": "Someone Else",
            "email": "mockoctocat@github.example",
        }

        response = client.get(
            "/auth/oauth/github/login",
            params={"code": "again"},
            follow_redirects=False,
        )

        assert response.status_code == 302
        query = parse_qs(urlparse(response.headers["location"]).query)
        assert query["error"] == ["account_conflict"]


class TestRegistration:
    def test_registration_sets_session_cookie(self, client, register):
        response = register()

        assert response.status_code == 303
        assert response.headers["location"] == FRONTEND_URL
        assert "auth_token" in response.cookies

        me = client.get("/auth/me").json()
        assert me["authenticated"] is True
        assert me["user"]["username"] == "octo"
        assert me["user"]["email"] == "mockoctocat@github.example"
        assert me["user"]["has_profile_image"] is True
        assert [link["provider"] for link in me["user"]["linked_accounts"]] == [
            "github"
        ]

    def test_invalid_registration_returns_form_with_errors(self, client, register):
        response = register(username="no spaces")

        assert response.status_code == 422
        form = response.json()
        assert form["fields"][0]["error"] == "Invalid"
        assert form["errors"][0]["code"] == "Invalid"

    def test_duplicate_username_across_providers(self, client, register):
        assert register("github").status_code == 303
        client.cookies.clear()

        # Facebook supplies email and name, so only the username is asked for
        response = register("facebook")
        assert response.status_code == 422
        assert response.json()["errors"][0]["code"] == "Duplicate"

    def test_returning_user_logs_in(self, client, register):
        register()
        client.cookies.clear()

        response = client.get(
            "/auth/oauth/github/login",
            params={"code": "again"},
            follow_redirects=False,
        )

        assert response.status_code == 302
        assert response.headers["location"] == FRONTEND_URL
        assert "auth_token" in response.cookies

    def test_logged_in_viewer_is_redirected_without_new_session(
        self, client, register
    ):
        register()

        response = client.get(
            "/auth/oauth/facebook/login",
            params={"code": "abc"},
            follow_redirects=False,
        )

        assert response.status_code == 302
        assert "auth_token" not in response.cookies


class TestSession:
    def test_me_without_cookie(self, client):
        response = client.get("/auth/me")

        assert response.status_code == 200
        assert response.json() == {"authenticated": False, "user": None}

    def test_me_with_invalid_cookie(self, client):
        client.cookies.set("auth_token", "garbage")

        assert client.get("/auth/me").json()["authenticated"] is False

    def test_logout_clears_cookie(self, client, register):
        register()

        response = client.post("/auth/logout")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Successfully logged out",
        }
        assert "auth_token" in response.headers.get("set-cookie", "")
