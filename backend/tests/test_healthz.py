"""
Test health endpoint for SkinTone Styler.
"""


def test_health_check(test_client):
    """Test health check reports service identity."""
    response = test_client.get("/healthz")

    assert response.status_code == 200
    data = response.json()

    # Check required fields
    assert data["ok"] is True
    assert "version" in data
    assert data["service"] == "skintone-styler"


def test_root_lists_endpoints(test_client):
    """Test root endpoint advertises the palette routes."""
    response = test_client.get("/")

    assert response.status_code == 200
    assert "/v1/palette" in response.json()["endpoints"]
