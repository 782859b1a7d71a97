# mypy: ignore-errors
# tests/v1/test_posts.py
"""Tests for post-related endpoints."""

from datetime import UTC, datetime

from fastapi import status


def _create_payload(author, category, **overrides) -> dict:
    payload = {
        "title": "Test post",
        "slug": "test-post",
        "excerpt": "Excerpt",
        "content": "Test post content",
        "author_id": author.id,
        "category_id": category.id,
        "tags": ["React"],
        "status": "published",
    }
    payload.update(overrides)
    return payload


def test_create_post_success(client, author, category) -> None:
    """Test successful post creation."""
    response = client.post("/api/v1/posts/", json=_create_payload(author, category))

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["slug"] == "test-post"
    assert data["views"] == 0
    assert data["likes"] == 0
    assert data["read_time"] == 1
    assert data["published_at"] is not None


def test_create_post_duplicate_slug(client, author, category, test_post) -> None:
    """Test that a taken slug is rejected with a conflict."""
    response = client.post(
        "/api/v1/posts/",
        json=_create_payload(author, category, slug=test_post.slug),
    )

    assert response.status_code == status.HTTP_409_CONFLICT
    assert "Slug already in use" in response.json()["detail"]


def test_create_post_unknown_category(client, author, category) -> None:
    response = client.post(
        "/api/v1/posts/",
        json=_create_payload(author, category, category_id="nope"),
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "Category not found" in response.json()["detail"]


def test_create_post_invalid_slug(client, author, category) -> None:
    response = client.post(
        "/api/v1/posts/",
        json=_create_payload(author, category, slug="Not A Slug"),
    )

    assert response.status_code == 422


def test_list_posts_defaults_to_published(client, make_post) -> None:
    """Test that drafts are hidden unless asked for."""
    published = make_post(status="published")
    draft = make_post(status="draft")

    response = client.get("/api/v1/posts/")

    assert response.status_code == status.HTTP_200_OK
    ids = [post["id"] for post in response.json()]
    assert ids == [published.id]

    drafts = client.get("/api/v1/posts/", params={"status": "draft"}).json()
    assert [post["id"] for post in drafts] == [draft.id]


def test_list_posts_shape(client, test_post, make_comment) -> None:
    make_comment(test_post)

    data = client.get("/api/v1/posts/").json()

    assert len(data) == 1
    post = data[0]
    assert post["author"]["username"] == "writer"
    assert post["category"]["slug"] == "ai-llm"
    assert post["comments_count"] == 1


def test_list_posts_filters(client, make_post, other_category) -> None:
    match = make_post(title="GPT tricks", tags=["AI"])
    make_post(title="GPT on servers", category_id=other_category.id)
    make_post(title="Other")

    response = client.get(
        "/api/v1/posts/",
        params={"category": "ai-llm", "search": "gpt", "tag": "AI"},
    )

    assert [post["id"] for post in response.json()] == [match.id]


def test_list_posts_sorted_by_effective_date(client, make_post) -> None:
    x = make_post(created_at=datetime(2025, 1, 1, tzinfo=UTC), published_at=None)
    y = make_post(
        created_at=datetime(2025, 1, 5, tzinfo=UTC),
        published_at=datetime(2025, 1, 2, tzinfo=UTC),
    )

    data = client.get("/api/v1/posts/").json()

    assert [post["id"] for post in data] == [y.id, x.id]


def test_list_drafts(client, make_post) -> None:
    draft = make_post(status="draft")
    make_post(status="published")

    data = client.get("/api/v1/posts/drafts").json()

    assert [post["id"] for post in data] == [draft.id]


def test_get_post_by_slug_counts_view(client, db_session, test_post) -> None:
    """Test retrieving a specific post by slug."""
    response = client.get(f"/api/v1/posts/{test_post.slug}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["id"] == test_post.id
    assert response.json()["views"] == 1

    client.get(f"/api/v1/posts/{test_post.slug}")
    db_session.refresh(test_post)
    assert test_post.views == 2


def test_get_post_by_id_does_not_count_view(client, db_session, test_post) -> None:
    response = client.get(f"/api/v1/posts/id/{test_post.id}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["slug"] == test_post.slug
    db_session.refresh(test_post)
    assert test_post.views == 0


def test_get_nonexistent_post(client) -> None:
    """Test retrieving a non-existent post."""
    assert client.get("/api/v1/posts/missing-post").status_code == status.HTTP_404_NOT_FOUND
    assert client.get("/api/v1/posts/id/missing").status_code == status.HTTP_404_NOT_FOUND


def test_unrenderable_post_is_server_error(client, make_post) -> None:
    post = make_post(author_id="no-such-author")

    response = client.get(f"/api/v1/posts/{post.slug}")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR


def test_update_post(client, test_post) -> None:
    response = client.put(
        f"/api/v1/posts/{test_post.id}",
        json={"title": "Renamed", "tags": ["Docker", "Docker"]},
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["title"] == "Renamed"
    assert data["slug"] == test_post.slug
    assert data["tags"] == ["Docker"]


def test_update_post_slug_collision(client, make_post, test_post) -> None:
    other = make_post(slug="other-post")

    response = client.put(f"/api/v1/posts/{test_post.id}", json={"slug": other.slug})

    assert response.status_code == status.HTTP_409_CONFLICT


def test_update_missing_post(client) -> None:
    response = client.put("/api/v1/posts/missing", json={"title": "x"})

    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_delete_post(client, test_post) -> None:
    response = client.delete(f"/api/v1/posts/{test_post.id}")
    assert response.status_code == status.HTTP_204_NO_CONTENT

    response = client.delete(f"/api/v1/posts/{test_post.id}")
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_like_post(client, db_session, test_post) -> None:
    response = client.post(f"/api/v1/posts/{test_post.id}/like")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"success": True}
    db_session.refresh(test_post)
    assert test_post.likes == 1


def test_like_missing_post(client) -> None:
    assert client.post("/api/v1/posts/missing/like").status_code == status.HTTP_404_NOT_FOUND
