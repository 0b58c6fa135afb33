"""Tests for the HTTP API."""

from datetime import UTC, date, datetime, timedelta
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from diet_tracker.api.app import create_app
from diet_tracker.containers import AppContainer
from diet_tracker.services.profiles import ProfileService
from diet_tracker.domain.profiles import GoalType
from tests.conftest import (
    VALID_TOKEN,
    InMemoryFoodRepository,
    InMemoryGoalRepository,
    InMemoryProfileRepository,
    UnparsableProfileRepository,
)

AUTH = {"Authorization": f"Bearer {VALID_TOKEN}"}


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


def _birth_date_for_age(years: int) -> str:
    return date(date.today().year - years, 1, 1).isoformat()


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.parametrize(
    "headers",
    [{}, {"Authorization": "Bearer"}, {"Authorization": "Basic abc"}, {"Authorization": "Bearer nope"}],
)
def test_requests_require_valid_token(client: TestClient, headers: dict[str, str]) -> None:
    assert client.get("/me/profile", headers=headers).status_code == 401
    assert client.get("/foods", headers=headers).status_code == 401


def test_profile_roundtrip(
    client: TestClient, user_id: UUID, profile_repository: InMemoryProfileRepository
) -> None:
    client.put("/me/profile/name", json={"name": "Ana"}, headers=AUTH)
    response = client.put(
        "/me/profile",
        json={
            "gender": "female",
            "birth_date": "1990-04-02",
            "height_cm": 165,
            "weight_kg": 60,
            "activity_level": "light",
        },
        headers=AUTH,
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Ana"
    assert profile_repository.profiles[user_id].weight_kg == 60

    fetched = client.get("/me/profile", headers=AUTH).json()
    assert fetched["activity_level"] == "light"
    assert fetched["birth_date"] == "1990-04-02"


def test_profile_blank_selects_are_cleared(client: TestClient) -> None:
    response = client.put(
        "/me/profile", json={"gender": "", "activity_level": None}, headers=AUTH
    )

    assert response.status_code == 200
    assert response.json()["gender"] is None


@pytest.mark.parametrize(
    "payload",
    [
        {"gender": "other"},
        {"activity_level": "extreme"},
        {"height_cm": -1},
        {"weight_kg": 0},
        {"birth_date": (date.today() + timedelta(days=1)).isoformat()},
    ],
)
def test_profile_rejects_invalid_input(client: TestClient, payload: dict) -> None:
    assert client.put("/me/profile", json=payload, headers=AUTH).status_code == 422


def test_goal_defaults_and_update(
    client: TestClient, user_id: UUID, goal_repository: InMemoryGoalRepository
) -> None:
    default = client.get("/me/goal", headers=AUTH).json()
    assert default == {
        "goal_type": "maintain",
        "target_weight_kg": None,
        "weekly_rate_kg": 0.25,
        "protein_per_kg": 1.8,
    }

    response = client.put(
        "/me/goal",
        json={"goal_type": "gain", "target_weight_kg": 85, "protein_per_kg": 2},
        headers=AUTH,
    )

    assert response.status_code == 200
    assert goal_repository.goals[user_id].goal_type is GoalType.GAIN


def test_goal_rejects_unknown_type(client: TestClient) -> None:
    response = client.put("/me/goal", json={"goal_type": "bulk"}, headers=AUTH)

    assert response.status_code == 422


def test_targets_insufficient_then_computed(client: TestClient) -> None:
    partial = client.get("/me/targets", headers=AUTH).json()
    assert partial["status"] == "insufficient_data"
    assert "gender" in partial["missing"]

    client.put(
        "/me/profile",
        json={
            "gender": "male",
            "birth_date": _birth_date_for_age(30),
            "height_cm": 180,
            "weight_kg": 80,
            "activity_level": "moderate",
        },
        headers=AUTH,
    )
    client.put("/me/goal", json={"goal_type": "lose"}, headers=AUTH)

    result = client.get("/me/targets", headers=AUTH).json()

    assert result["status"] == "ok"
    assert result["bmr"] == pytest.approx(1780)
    assert result["calorie_target"] == pytest.approx(2259)
    assert result["macros"]["carbs_g"] == pytest.approx(210.375)
    assert result["macros"]["fat_g"] == pytest.approx(93.5)


def test_foods_listed_by_name(
    client: TestClient, food_repository: InMemoryFoodRepository
) -> None:
    food_repository.add("Rice", 130, 2.5, 28, 0.3)
    food_repository.add("Apple", 52, 0.3, 14, 0.2)

    foods = client.get("/foods", headers=AUTH).json()["foods"]

    assert [food["name"] for food in foods] == ["Apple", "Rice"]
    assert foods[0]["kcal_per_100g"] == 52


def test_today_meal_logging(
    client: TestClient, food_repository: InMemoryFoodRepository
) -> None:
    bread = food_repository.add("Bread", 200, 8, 40, 2)
    soup = food_repository.add("Soup", 50, 2, 6, 1)

    empty = client.get("/me/meals/today", headers=AUTH).json()
    assert empty["items"] == []
    assert empty["meal"]["date"] == datetime.now(tz=UTC).date().isoformat()

    client.post(
        "/me/meals/today/items",
        json={"food_id": str(bread.id), "quantity_g": 150},
        headers=AUTH,
    )
    response = client.post(
        "/me/meals/today/items",
        json={"food_id": str(soup.id), "quantity_g": 300},
        headers=AUTH,
    )

    assert response.status_code == 201
    body = response.json()
    assert [item["kcal"] for item in body["items"]] == [
        pytest.approx(300),
        pytest.approx(150),
    ]
    assert body["totals"]["kcal"] == pytest.approx(450)


def test_add_meal_item_validation(
    client: TestClient, food_repository: InMemoryFoodRepository
) -> None:
    food = food_repository.add("Apple", 52, 0.3, 14, 0.2)

    zero = client.post(
        "/me/meals/today/items",
        json={"food_id": str(food.id), "quantity_g": 0},
        headers=AUTH,
    )
    unknown = client.post(
        "/me/meals/today/items",
        json={"food_id": str(uuid4()), "quantity_g": 100},
        headers=AUTH,
    )

    assert zero.status_code == 422
    assert unknown.status_code == 404


def test_add_meal_item_rejects_non_finite_quantity(
    client: TestClient, food_repository: InMemoryFoodRepository
) -> None:
    food = food_repository.add("Apple", 52, 0.3, 14, 0.2)

    response = client.post(
        "/me/meals/today/items",
        content=f'{{"food_id": "{food.id}", "quantity_g": Infinity}}',
        headers={**AUTH, "content-type": "application/json"},
    )

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert isinstance(detail, list)
    assert detail[0]["loc"][-1] == "quantity_g"


def test_today_meal_loads_with_unparsable_profile(
    client: TestClient, user_id: UUID, profile_service: ProfileService
) -> None:
    profiles = UnparsableProfileRepository()
    profiles.upsert_name(user_id, "Ana")
    profile_service.profile_repository = profiles

    response = client.get("/me/meals/today", headers=AUTH)

    assert response.status_code == 200
    assert response.json()["items"] == []
    assert client.get("/me/profile", headers=AUTH).status_code == 422
