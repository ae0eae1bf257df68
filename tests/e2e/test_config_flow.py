"""End-to-end tests for setup issue pages and health."""


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["environment"] == "test"


def test_issue_pages_require_session(client):
    assert client.get("/config/issue/").status_code == 401
    assert client.get("/config/issue/auth.no-providers").status_code == 401


def test_configured_test_environment_has_no_issues(client, register):
    register()

    response = client.get("/config/issue/")

    assert response.status_code == 200
    assert response.json() == {"issues": []}


def test_unreported_issue_is_resolved(client, register):
    register()

    response = client.get("/config/issue/auth.no-providers")

    assert response.status_code == 200
    data = response.json()
    assert data["resolved"] is True
    assert data["title"] == "Resolved Issue"
    assert data["issue_list_path"] == "/config/issue/"
