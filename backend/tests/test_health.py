from fastapi import status


def test_health(client):
    """Test the health endpoint"""
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["status"] == "ok"
    assert body["service"] == "studio-api"
    assert body["timestamp"]


def test_unknown_route(client):
    """Test that unknown routes return 404 rather than an error"""
    response = client.get("/api/v1/nothing-here")
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_unexpected_error_returns_generic_500(server_error_client, register_user, monkeypatch):
    """Test that an unhandled error becomes a generic 500 response"""
    from app.services import ProjectService

    registered = register_user()

    def broken_list_projects(self, user_id):
        raise RuntimeError("database exploded")

    monkeypatch.setattr(ProjectService, "list_projects", broken_list_projects)

    response = server_error_client.get(
        "/api/v1/projects",
        headers={"Authorization": f"Bearer {registered['token']}"}
    )
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"detail": "Internal server error"}
    assert "database exploded" not in response.text
