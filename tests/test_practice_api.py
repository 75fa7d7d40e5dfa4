from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def test_list_levels():
    r = client.get("/levels")
    assert r.status_code == 200
    data = r.json()
    assert [lv["id"] for lv in data] == ["level1", "level2", "level3"]
    assert data[0] == {"id": "level1", "min": 1, "max": 100, "label": "LEVEL 1 (1-100)"}


def test_list_operators():
    r = client.get("/operators")
    data = r.json()
    assert [op["id"] for op in data] == ["+", "-", "*", "/", "%"]
    assert data[3]["label"] == "DIVISION (/)"


def test_generate_modulo():
    for _ in range(20):
        r = client.get("/generate", params={"operator": "%", "level": "level2"})
        assert r.status_code == 200
        q = r.json()
        assert q["level"] == "level2"
        assert 0 <= q["correct_answer"] < q["operand2"]
        assert q["correct_answer"] == q["operand1"] % q["operand2"]


def test_generate_defaults_to_addition():
    q = client.get("/generate").json()
    assert q["operator"] == "+"
    assert q["correct_answer"] == q["operand1"] + q["operand2"]


def test_generate_unknown_level():
    r = client.get("/generate", params={"level": "level4"})
    assert r.status_code == 422


def test_check_accepts_zero_decimal():
    r = client.post("/check", json={"answer": "12.00", "correct_answer": 12})
    body = r.json()
    assert body["ok"] is True and body["accepted"] is True and body["parsed_value"] == 12


def test_check_fraction_wrong():
    body = client.post("/check", json={"answer": "12.5", "correct_answer": 12}).json()
    assert body["ok"] is True and body["accepted"] is False
    assert body["parsed_value"] is None


def test_check_invalid():
    body = client.post("/check", json={"answer": "twelve", "correct_answer": 12}).json()
    assert body["ok"] is False and body["accepted"] is False
    assert "whole number" in body["feedback"].lower()


def test_check_answer_as_json_number():
    body = client.post("/check", json={"answer": 12, "correct_answer": 12}).json()
    assert body["ok"] is True and body["accepted"] is True
