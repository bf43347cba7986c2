def _create_request(client, from_user_id, to_user_id):
    response = client.post(
        "/api/swap-requests",
        json={
            "from_user_id": from_user_id,
            "to_user_id": to_user_id,
            "offered_skill": "JS",
            "wanted_skill": "Design",
        },
    )
    assert response.status_code == 200
    return response.get_json()["id"]


def test_health(client):
    assert client.get("/api/health").get_json() == {"status": "ok"}


def test_swap_chat_scenario(client, users):
    alice_id, bob_id, _ = users
    request_id = _create_request(client, alice_id, bob_id)

    received = client.get(f"/api/swap-requests/received/{bob_id}").get_json()
    assert received[0]["id"] == request_id
    assert received[0]["status"] == "pending"
    assert received[0]["from_user_name"] == "Alice Brown"

    response = client.put(f"/api/swap-requests/{request_id}", json={"status": "accepted"})
    assert response.status_code == 200
    assert response.get_json() == {"success": True, "message": "Swap request accepted"}

    feed = client.get(f"/api/notifications/{alice_id}").get_json()
    assert feed[0]["title"] == "Swap Request Accepted"
    assert feed[0]["type"] == "swap_response"

    response = client.post(
        f"/api/chat/{request_id}", json={"sender_id": bob_id, "receiver_id": alice_id, "message": "hi"}
    )
    assert response.status_code == 200
    body = response.get_json()
    assert body["success"] is True
    assert body["message"] == "Message sent successfully"

    messages = client.get(f"/api/chat/{request_id}").get_json()
    assert [m["message"] for m in messages] == ["hi"]

    conversations = client.get(f"/api/chat/user/{alice_id}").get_json()
    assert conversations[0]["unread_count"] == 1


def test_invalid_transition_status(client, users):
    alice_id, bob_id, _ = users
    request_id = _create_request(client, alice_id, bob_id)

    response = client.put(f"/api/swap-requests/{request_id}", json={"status": "cancelled"})

    assert response.status_code == 400
    assert "error" in response.get_json()
    sent = client.get(f"/api/swap-requests/sent/{alice_id}").get_json()
    assert sent[0]["status"] == "pending"
    assert sent[0]["to_user_email"] == "bob@example.com"


def test_create_swap_request_missing_fields(client, users):
    response = client.post("/api/swap-requests", json={"from_user_id": users[0]})
    assert response.status_code == 400
    assert response.get_json()["error"].startswith("Missing required fields")


def test_chat_gate_errors(client, users):
    alice_id, bob_id, _ = users
    request_id = _create_request(client, alice_id, bob_id)
    payload = {"sender_id": bob_id, "receiver_id": alice_id, "message": "hi"}

    pending = client.post(f"/api/chat/{request_id}", json=payload)
    assert pending.status_code == 400
    assert pending.get_json() == {"error": "Chat is only available for accepted swap requests"}

    missing = client.post("/api/chat/9999", json=payload)
    assert missing.status_code == 404

    incomplete = client.post(f"/api/chat/{request_id}", json={"sender_id": bob_id})
    assert incomplete.status_code == 400

    assert client.get(f"/api/chat/{request_id}").get_json() == []


def test_notification_read_state(client, users):
    alice_id, bob_id, _ = users
    _create_request(client, alice_id, bob_id)
    _create_request(client, alice_id, bob_id)

    assert client.get(f"/api/notifications/{bob_id}/unread-count").get_json() == {"count": 2}

    first = client.get(f"/api/notifications/{bob_id}").get_json()[0]
    assert client.put(f"/api/notifications/{first['id']}/read").get_json() == {"success": True}
    assert client.get(f"/api/notifications/{bob_id}/unread-count").get_json() == {"count": 1}

    assert client.put(f"/api/notifications/{bob_id}/read-all").get_json() == {"success": True}
    assert client.get(f"/api/notifications/{bob_id}/unread-count").get_json() == {"count": 0}
    assert client.put("/api/notifications/31337/read").status_code == 200


def test_unread_count_for_unknown_user(client):
    assert client.get("/api/notifications/5/unread-count").get_json() == {"count": 0}


def test_users_and_admin_endpoints(client):
    response = client.post("/api/users", json={"name": "Eve", "email": "eve@example.com", "password": "pw"})
    assert response.status_code == 200
    user_id = response.get_json()["id"]

    assert client.get(f"/api/users/{user_id}").get_json()["email"] == "eve@example.com"
    assert client.get("/api/users/999").status_code == 404
    assert client.post("/api/users", json={"name": "Eve"}).status_code == 400

    response = client.put(f"/api/admin/users/{user_id}/status", json={"status": "flagged"})
    assert response.get_json() == {"success": True}
    assert client.get("/api/admin/logs").get_json()[0]["target_type"] == "user"

    stats = client.get("/api/dashboard/stats").get_json()
    assert stats["totalUsers"] == 0
    assert client.get("/api/admin/swap-stats").get_json() == {"pending": 0, "accepted": 0, "rejected": 0}


def test_store_failure_returns_500(app, client, failing_gateway):
    from skillswap.services import Services

    app.extensions["skillswap_services"] = Services(failing_gateway)

    response = client.get("/api/swap-requests/received/1")

    assert response.status_code == 500
    assert response.get_json() == {"error": "connection refused"}


def test_admin_broadcast_endpoints(client):
    response = client.post("/api/admin/messages", json={"message": "Welcome to the swap board"})
    assert response.status_code == 200
    body = response.get_json()
    assert body["success"] is True

    messages = client.get("/api/admin/messages").get_json()
    assert messages[0]["id"] == body["id"]
    assert messages[0]["message"] == "Welcome to the swap board"
    assert client.get("/api/admin/logs").get_json()[0]["action"] == "send_message"

    assert client.post("/api/admin/messages", json={}).status_code == 400
