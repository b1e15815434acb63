def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "healthy", "service": "order-service"}


def test_service_info(client):
    r = client.get("/")
    assert r.status_code == 200
    body = r.json()
    assert body["service"] == "order-service"
    assert body["status"] == "running"
    assert body["endpoints"]["createOrder"] == "POST /orders"
