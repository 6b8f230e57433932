from __future__ import annotations

from web import create_app


def main() -> None:
    app = create_app()
    client = app.test_client()

    # new game, human plays dark
    resp = client.post("/api/new", json={"depth": 2})
    assert resp.status_code == 200, resp.data
    data = resp.get_json()
    assert "board" in data and "legal_moves" in data

    # make a move and wait for the computer's reply
    resp = client.post("/api/move", json={"row": 2, "col": 3})
    assert resp.status_code == 200, resp.data
    data = client.get("/api/state?wait=1").get_json()
    assert data["turn"] == "dark"
    print("Smoke OK. Computer replied:", data["last_move"])


if __name__ == "__main__":
    main()
