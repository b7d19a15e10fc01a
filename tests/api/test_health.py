def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_health_check_db(client):
    response = client.get("/health/db")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Database connection OK"}
