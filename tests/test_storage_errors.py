def test_submit_during_outage_returns_500(client, storage_outage, survey_payload):
    r = client.post("/api/submit", json=survey_payload)
    assert r.status_code == 500
    message = r.json()["message"]
    assert message.startswith("Server error during submission: ")
    assert "connection refused" in message


def test_results_during_outage_returns_500(client, storage_outage):
    r = client.get("/api/results")
    assert r.status_code == 500
    message = r.json()["message"]
    assert message.startswith("Server error fetching results: ")
    assert "connection refused" in message


def test_service_recovers_after_outage(client, survey_payload):
    # storage_outage ist hier nicht aktiv: normale Session
    r = client.post("/api/submit", json=survey_payload)
    assert r.status_code == 201
    assert client.get("/api/results").status_code == 200
