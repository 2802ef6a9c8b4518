"""Tests for card API endpoints."""

from httpx import AsyncClient

from bingoboard.services.game_state import GameState


class TestAddCard:
    async def test_add_from_numbers(self, client: AsyncClient) -> None:
        response = await client.post("/cards", json={"numbers": [[1, 2], [None, 4]]})

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == "CARD-1"
        assert data["title"] == "Card #1"
        assert data["numbers"] == [[1, 2], [None, 4]]
        assert data["marked_count"] == 1
        assert data["is_winner"] is False

    async def test_add_from_entry(self, client: AsyncClient) -> None:
        response = await client.post(
            "/cards", json={"entry": [["1", "2", "3"], ["4", "FREE", "6"], ["7", "8", "9"]]}
        )

        assert response.status_code == 201
        assert response.json()["numbers"][1] == [4, None, 6]

    async def test_added_card_reflects_calls(self, client: AsyncClient, game: GameState) -> None:
        game.call_number(1)
        game.call_number(2)

        response = await client.post("/cards", json={"numbers": [[1, 2], [3, 4]]})

        data = response.json()
        assert data["is_winner"] is True
        assert data["winning_lines"] == [{"kind": "row", "index": 0}]

    async def test_bad_entry_cell(self, client: AsyncClient, game: GameState) -> None:
        response = await client.post("/cards", json={"entry": [["1", "x"], ["3", "4"]]})

        assert response.status_code == 400
        failure = response.json()["failure"]
        assert failure["kind"] == "invalid_grid"
        assert failure["message"] == "Invalid number at Row 1, Col 2"
        assert len(game.cards) == 0

    async def test_ragged_numbers(self, client: AsyncClient) -> None:
        response = await client.post("/cards", json={"numbers": [[1, 2], [3]]})

        assert response.status_code == 400
        assert response.json()["failure"]["kind"] == "invalid_grid"

    async def test_out_of_bounds_shape_rejected(
        self, client: AsyncClient, game: GameState
    ) -> None:
        response = await client.post("/cards", json={"numbers": [[5]]})

        assert response.status_code == 400
        assert response.json()["failure"]["kind"] == "invalid_dimensions"
        assert len(game.cards) == 0

    async def test_requires_exactly_one_grid(self, client: AsyncClient) -> None:
        response = await client.post("/cards", json={})
        assert response.status_code == 422

        response = await client.post(
            "/cards", json={"numbers": [[1]], "entry": [["1"]]}
        )
        assert response.status_code == 422

    async def test_non_positive_number_rejected(self, client: AsyncClient) -> None:
        response = await client.post("/cards", json={"numbers": [[0, 2], [3, 4]]})

        assert response.status_code == 422


class TestListCards:
    async def test_winners_first(self, client: AsyncClient, game: GameState) -> None:
        a = game.add_card([[1, 2], [3, 4]])
        b = game.add_card([[5, 6], [7, 8]])
        c = game.add_card([[9, 10], [11, 12]])
        game.call_number(6)
        game.call_number(8)

        response = await client.get("/cards")

        assert [card["id"] for card in response.json()] == [b.id, a.id, c.id]

    async def test_template(self, client: AsyncClient) -> None:
        response = await client.get("/cards/template")

        data = response.json()
        assert (data["rows"], data["cols"]) == (5, 5)
        assert data["entry"][2][2] == "FREE"


class TestRenameAndDelete:
    async def test_rename(self, client: AsyncClient, game: GameState, small_grid) -> None:
        card = game.add_card(small_grid)

        response = await client.patch(f"/cards/{card.id}", json={"title": "Lucky"})

        assert response.status_code == 200
        assert response.json()["cards"][0]["title"] == "Lucky"

    async def test_rename_blank_displays_id(
        self, client: AsyncClient, game: GameState, small_grid
    ) -> None:
        card = game.add_card(small_grid)

        response = await client.patch(f"/cards/{card.id}", json={"title": ""})

        assert response.json()["cards"][0]["display_title"] == card.id

    async def test_rename_unknown_tolerated(self, client: AsyncClient) -> None:
        response = await client.patch("/cards/CARD-404", json={"title": "Nope"})

        assert response.status_code == 200

    async def test_delete(self, client: AsyncClient, game: GameState, small_grid) -> None:
        card = game.add_card(small_grid)

        response = await client.delete(f"/cards/{card.id}")

        assert response.status_code == 200
        assert response.json()["cards"] == []

    async def test_delete_unknown_tolerated(self, client: AsyncClient) -> None:
        response = await client.delete("/cards/CARD-404")

        assert response.status_code == 200
