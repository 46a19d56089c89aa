"""Integration tests for the catalogue REST endpoints."""

from __future__ import annotations

import typing as typ

import pytest

if typ.TYPE_CHECKING:
    from falcon import testing

INVALID_BODY = "Invalid request body"


def _create(
    client: testing.TestClient,
    path: str,
    payload: dict[str, typ.Any],
) -> dict[str, typ.Any]:
    """POST a record and return the created JSON object."""
    response = client.simulate_post(path, json=payload)
    assert response.status_code == 201, (
        f"Expected POST {path} to return 201, got {response.status_code}."
    )
    return typ.cast("dict[str, typ.Any]", response.json)


def _create_show_season_episode(
    client: testing.TestClient,
) -> tuple[dict[str, typ.Any], dict[str, typ.Any], dict[str, typ.Any]]:
    """Create a show with one season and one episode."""
    show = _create(client, "/shows", {"title": "Dark", "year": 2017})
    season = _create(
        client,
        "/seasons",
        {"show_id": show["id"], "season_number": 1},
    )
    episode = _create(
        client,
        "/episodes",
        {"show_id": show["id"], "season_id": season["id"], "episode_number": 1},
    )
    return show, season, episode


def _assert_bad_request(response: testing.Result, description: str) -> None:
    assert response.status_code == 400, "Expected 400 Bad Request."
    assert response.json["description"] == description, (
        f"Expected description {description!r}, got {response.json!r}."
    )


class TestShowEndpoints:
    """Show collection and item endpoints."""

    @staticmethod
    def test_create_show_without_year(catalog_api_client: testing.TestClient) -> None:
        """Omitting the year stores null."""
        created = _create(catalog_api_client, "/shows", {"title": "X"})

        assert created == {"id": created["id"], "title": "X", "year": None}, (
            "Expected the created show with a null year."
        )

    @staticmethod
    def test_get_and_list_shows(catalog_api_client: testing.TestClient) -> None:
        """Created shows are returned by id and in listings."""
        created = _create(catalog_api_client, "/shows", {"title": "X", "year": 2026})

        get_response = catalog_api_client.simulate_get(f"/shows/{created['id']}")
        list_response = catalog_api_client.simulate_get("/shows")

        assert get_response.status_code == 200, "Expected GET to return 200."
        assert get_response.json == created, "Expected GET to match the create."
        assert list_response.status_code == 200, "Expected list to return 200."
        assert list_response.json == [created], "Expected one show in the list."

    @staticmethod
    def test_list_is_empty_array_without_rows(
        catalog_api_client: testing.TestClient,
    ) -> None:
        """Listing with no rows answers an empty JSON array."""
        response = catalog_api_client.simulate_get("/episodes")

        assert response.status_code == 200, "Expected list to return 200."
        assert response.json == [], "Expected an empty array."

    @staticmethod
    def test_patch_updates_only_supplied_fields(
        catalog_api_client: testing.TestClient,
    ) -> None:
        """PATCH returns an empty 200 and keeps omitted fields."""
        created = _create(catalog_api_client, "/shows", {"title": "X", "year": 2026})

        response = catalog_api_client.simulate_patch(
            f"/shows/{created['id']}",
            json={"title": "Y"},
        )

        assert response.status_code == 200, "Expected PATCH to return 200."
        assert response.text == "", "Expected an empty update response body."
        fetched = catalog_api_client.simulate_get(f"/shows/{created['id']}").json
        assert fetched == {"id": created["id"], "title": "Y", "year": 2026}, (
            "Expected only the title to change."
        )

    @staticmethod
    def test_put_clears_year_with_null(catalog_api_client: testing.TestClient) -> None:
        """PUT accepts null for the year and persists it."""
        created = _create(catalog_api_client, "/shows", {"title": "X", "year": 2026})

        response = catalog_api_client.simulate_put(
            f"/shows/{created['id']}",
            json={"year": None},
        )

        assert response.status_code == 200, "Expected PUT to return 200."
        fetched = catalog_api_client.simulate_get(f"/shows/{created['id']}").json
        assert fetched["year"] is None, "Expected the year to be cleared."

    @staticmethod
    def test_delete_show(catalog_api_client: testing.TestClient) -> None:
        """DELETE returns an empty 200 and later lookups 404."""
        created = _create(catalog_api_client, "/shows", {"title": "X"})

        response = catalog_api_client.simulate_delete(f"/shows/{created['id']}")

        assert response.status_code == 200, "Expected DELETE to return 200."
        assert response.text == "", "Expected an empty delete response body."
        missing = catalog_api_client.simulate_get(f"/shows/{created['id']}")
        assert missing.status_code == 404, "Expected the deleted show to 404."

    @staticmethod
    @pytest.mark.parametrize(
        ("method", "path"),
        [
            ("GET", "/shows/missing"),
            ("DELETE", "/shows/missing"),
            ("GET", "/seasons/missing"),
            ("DELETE", "/episodes/missing"),
        ],
    )
    def test_missing_entities_return_404(
        catalog_api_client: testing.TestClient,
        method: str,
        path: str,
    ) -> None:
        """Unknown identifiers answer 404 with the not-found message."""
        response = catalog_api_client.simulate_request(method, path)

        assert response.status_code == 404, f"Expected {method} {path} to 404."
        assert response.json["description"].endswith("not found"), (
            "Expected the not-found message as the description."
        )

    @staticmethod
    def test_patch_missing_show_returns_404(
        catalog_api_client: testing.TestClient,
    ) -> None:
        """Updating an unknown show answers 404."""
        response = catalog_api_client.simulate_patch(
            "/shows/missing",
            json={"title": "Y"},
        )

        assert response.status_code == 404, "Expected PATCH of a missing show to 404."
        assert response.json["description"] == "Show not found", (
            "Expected the show not-found message."
        )


class TestBodyValidation:
    """Strict request-body validation."""

    @staticmethod
    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"year": 2020},
            {"title": 7},
            {"title": "X", "year": "2020"},
            {"title": "X", "year": True},
            {"title": "X", "year": None},
            {"title": "X", "year": 10**20},
            {"title": "X", "rating": 5},
            ["title", "X"],
        ],
    )
    def test_invalid_show_create_bodies(
        catalog_api_client: testing.TestClient,
        payload: object,
    ) -> None:
        """Malformed show bodies answer 400 and store nothing."""
        response = catalog_api_client.simulate_post("/shows", json=payload)

        _assert_bad_request(response, INVALID_BODY)
        assert catalog_api_client.simulate_get("/shows").json == [], (
            "Expected no show to be stored."
        )

    @staticmethod
    def test_empty_post_body_is_rejected(
        catalog_api_client: testing.TestClient,
    ) -> None:
        """A POST without a body answers 400."""
        response = catalog_api_client.simulate_post("/shows")

        _assert_bad_request(response, INVALID_BODY)

    @staticmethod
    def test_unparseable_json_is_rejected(
        catalog_api_client: testing.TestClient,
    ) -> None:
        """Bodies that are not valid JSON answer 400 with the shared message."""
        created = _create(catalog_api_client, "/shows", {"title": "X"})
        headers = {"Content-Type": "application/json"}

        post = catalog_api_client.simulate_post(
            "/shows",
            body="{not json",
            headers=headers,
        )
        patch = catalog_api_client.simulate_patch(
            f"/shows/{created['id']}",
            body="{not json",
            headers=headers,
        )

        _assert_bad_request(post, INVALID_BODY)
        _assert_bad_request(patch, INVALID_BODY)
        assert catalog_api_client.simulate_get("/shows").json == [created], (
            "Expected only the first show, unchanged."
        )

    @staticmethod
    @pytest.mark.parametrize(
        "payload",
        [
            {"title": None},
            {"year": 20.5},
            {"id": "other"},
        ],
    )
    def test_invalid_show_update_bodies(
        catalog_api_client: testing.TestClient,
        payload: dict[str, typ.Any],
    ) -> None:
        """Malformed show updates answer 400."""
        created = _create(catalog_api_client, "/shows", {"title": "X"})

        response = catalog_api_client.simulate_patch(
            f"/shows/{created['id']}",
            json=payload,
        )

        _assert_bad_request(response, INVALID_BODY)

    @staticmethod
    @pytest.mark.parametrize(
        ("path", "payload"),
        [
            ("/seasons", {"show_id": "s"}),
            ("/seasons", {"show_id": "s", "season_number": "1"}),
            ("/seasons", {"show_id": 1, "season_number": 1}),
            ("/episodes", {"show_id": "s", "season_id": "t"}),
            ("/episodes", {"show_id": "s", "season_id": "t", "episode_number": False}),
        ],
    )
    def test_invalid_season_and_episode_bodies(
        catalog_api_client: testing.TestClient,
        path: str,
        payload: dict[str, typ.Any],
    ) -> None:
        """Malformed season and episode bodies answer 400."""
        response = catalog_api_client.simulate_post(path, json=payload)

        _assert_bad_request(response, INVALID_BODY)

    @staticmethod
    def test_empty_title_is_a_domain_error(
        catalog_api_client: testing.TestClient,
    ) -> None:
        """Domain validation failures answer 400 with the domain message."""
        response = catalog_api_client.simulate_post("/shows", json={"title": ""})

        _assert_bad_request(response, "Show title cannot be blank")

    @staticmethod
    def test_episode_number_below_one_on_update(
        catalog_api_client: testing.TestClient,
    ) -> None:
        """Invalid episode numbers on update answer 400 and change nothing."""
        _, _, episode = _create_show_season_episode(catalog_api_client)

        response = catalog_api_client.simulate_patch(
            f"/episodes/{episode['id']}",
            json={"episode_number": 0},
        )

        _assert_bad_request(response, "Episode number must be greater than 0")
        fetched = catalog_api_client.simulate_get(f"/episodes/{episode['id']}").json
        assert fetched == episode, "Expected the episode to be unchanged."


class TestSeasonAndEpisodeEndpoints:
    """Season and episode endpoints and storage failures."""

    @staticmethod
    def test_season_and_episode_lifecycle(
        catalog_api_client: testing.TestClient,
    ) -> None:
        """Seasons and episodes can be created, updated and deleted."""
        show, season, episode = _create_show_season_episode(catalog_api_client)

        assert season == {
            "id": season["id"],
            "show_id": show["id"],
            "season_number": 1,
        }, "Expected the season record shape."
        assert episode == {
            "id": episode["id"],
            "show_id": show["id"],
            "season_id": season["id"],
            "episode_number": 1,
        }, "Expected the episode record shape."

        update = catalog_api_client.simulate_patch(
            f"/seasons/{season['id']}",
            json={"season_number": 0},
        )
        assert update.status_code == 200, "Expected the season update to succeed."
        seasons = catalog_api_client.simulate_get("/seasons").json
        assert seasons == [{**season, "season_number": 0}], (
            "Expected the listed season to reflect the update."
        )

        deleted = catalog_api_client.simulate_delete(f"/episodes/{episode['id']}")
        assert deleted.status_code == 200, "Expected the episode delete to succeed."
        assert catalog_api_client.simulate_get("/episodes").json == [], (
            "Expected no episodes after delete."
        )

    @staticmethod
    def test_storage_errors_return_generic_500(
        catalog_api_client: testing.TestClient,
    ) -> None:
        """Constraint violations answer 500 without leaking details."""
        response = catalog_api_client.simulate_post(
            "/seasons",
            json={"show_id": "no-such-show", "season_number": 1},
        )

        assert response.status_code == 500, "Expected a 500 for a storage error."
        assert response.json["description"] == "Unknown server error", (
            "Expected the generic error description."
        )
        assert "FOREIGN" not in response.text, "Expected no database details."

    @staticmethod
    def test_duplicate_season_number_returns_500(
        catalog_api_client: testing.TestClient,
    ) -> None:
        """A duplicate season number is a storage error."""
        show, _, _ = _create_show_season_episode(catalog_api_client)

        response = catalog_api_client.simulate_post(
            "/seasons",
            json={"show_id": show["id"], "season_number": 1},
        )

        assert response.status_code == 500, "Expected a 500 for a duplicate."
        assert len(catalog_api_client.simulate_get("/seasons").json) == 1, (
            "Expected the duplicate not to be stored."
        )

    @staticmethod
    def test_delete_show_with_seasons_returns_500(
        catalog_api_client: testing.TestClient,
    ) -> None:
        """Deleting a show that still has seasons fails and keeps the show."""
        show, _, _ = _create_show_season_episode(catalog_api_client)

        response = catalog_api_client.simulate_delete(f"/shows/{show['id']}")

        assert response.status_code == 500, "Expected a 500 for a referenced show."
        assert response.json["description"] == "Unknown server error", (
            "Expected the generic error description."
        )
        fetched = catalog_api_client.simulate_get(f"/shows/{show['id']}")
        assert fetched.status_code == 200, "Expected the show to still exist."
        assert fetched.json == show, "Expected the show to be unchanged."
