"""API tests for the analytics dashboard."""

import pytest


@pytest.mark.asyncio
async def test_overview(client):
    response = await client.get("/api/v1/analytics/overview")

    assert response.status_code == 200
    data = response.json()
    assert data["popular_faqs"][0]["id"] == "visiting-hours"
    assert data["popular_resources"][0]["id"] == "plant-based-starter-guide"
    assert data["category_popularity"]["visiting"] == 1250 + 980 + 567 + 445
    assert data["download_stats"]["animal-intelligence"] == 1247
    assert data["helpfulness"]["total_votes"] == 508


@pytest.mark.asyncio
async def test_trending(client):
    response = await client.get("/api/v1/analytics/trending")

    data = response.json()
    assert 0 < len(data["faqs"]) <= 5
    assert 0 < len(data["resources"]) <= 5
    # animal-cognition-video has no downloads, so it never trends
    assert "animal-cognition-video" not in {r["id"] for r in data["resources"]}


@pytest.mark.asyncio
async def test_recommendations(client):
    response = await client.post(
        "/api/v1/analytics/recommendations",
        json={"viewed_faq_ids": ["animal-species"], "downloaded_resource_ids": []},
    )

    data = response.json()
    assert [f["id"] for f in data["faqs"]] == ["animal-stories"]
    assert data["resources"] == []


@pytest.mark.asyncio
async def test_tag_usage(client):
    response = await client.get("/api/v1/analytics/tags")

    assert response.status_code == 200
    data = response.json()
    assert data["faq_tags"]["tours"] == 3
    assert data["faq_tags"]["rescue"] == 2
    assert data["faq_tags"]["parking"] == 1
    assert data["resource_tags"]["beginner-friendly"] == 4
    assert data["resource_tags"]["printable"] == 3
