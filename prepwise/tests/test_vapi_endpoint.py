"""
Endpoint tests for /api/vapi/generate.
"""
from prepwise.services.pipeline.interview_generator import GENERATED_MESSAGE, MISSING_FIELDS_MESSAGE

ARGS = {"role": "Frontend Engineer", "type": "mixed", "level": "senior", "userid": "u1", "techstack": "React,TypeScript", "amount": 3}


def test_get_acknowledges(client):
    response = client.get("/api/vapi/generate")
    assert response.status_code == 200
    assert response.json() == {"success": True, "data": "THANK YOU!"}


def test_direct_post_generates_interview(client, db, model):
    model.replies.append('["Q1", "Q2", "Q3"]')

    response = client.post("/api/vapi/generate", json=ARGS)

    assert response.status_code == 200
    assert response.json() == {"results": [{"toolCallId": None, "result": GENERATED_MESSAGE}]}
    assert len(db.collection("interviews").docs) == 1
    assert "X-Request-ID" in response.headers


def test_tool_call_post_echoes_call_id(client, model):
    model.replies.append('```json\n["Q1"]\n```')
    body = {
        "message": {
            "type": "tool-calls",
            "toolCallList": [{"id": "call_123", "function": {"arguments": ARGS}}],
        }
    }

    response = client.post("/api/vapi/generate", json=body)

    assert response.status_code == 200
    assert response.json()["results"][0]["toolCallId"] == "call_123"


def test_missing_field_is_400(client, model):
    response = client.post("/api/vapi/generate", json={**ARGS, "level": ""})

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": {"message": MISSING_FIELDS_MESSAGE}}
    assert model.prompts == []


def test_invalid_model_output_is_500_with_raw(client, db, model):
    raw = "I'm sorry, I can't help with that."
    model.replies.append(raw)

    response = client.post("/api/vapi/generate", json=ARGS)

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["error"]["raw"] == raw
    assert db.collection("interviews").docs == {}


def test_model_exception_is_500_with_message(client, model):
    model.replies.append(RuntimeError("upstream unavailable"))

    response = client.post("/api/vapi/generate", json=ARGS)

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": {"message": "upstream unavailable"}}


def test_unparseable_body_is_400(client, db, model):
    response = client.post("/api/vapi/generate", content="{not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": {"message": "Invalid request."}}
    assert model.prompts == []
    assert db.collection("interviews").docs == {}
