# mypy: ignore-errors
# tests/test_post_details.py
"""Tests for post view assembly and the list filter/sort policy."""

from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest

from inkwell.models import Category, Post
from inkwell.schemas.post import PostFilters
from inkwell.services.errors import DataIntegrityError
from inkwell.services.post_details import PostDetailAssembler, matches_filters


def test_assemble_joins_author_category_and_count(
    store, test_post, author, category, make_comment
) -> None:
    """The view carries the public author projection, category and comment count."""
    make_comment(test_post, minutes=1)
    make_comment(test_post, minutes=2, is_approved=False)

    view = PostDetailAssembler(store).assemble(test_post)

    assert view.id == test_post.id
    assert view.slug == "hello-inkwell"
    assert view.author.id == author.id
    assert view.author.username == "writer"
    assert view.author.bio == "Writes about systems"
    assert set(view.author.model_dump()) == {
        "id", "name", "username", "email", "avatar", "bio", "created_at",
    }
    assert view.category.slug == category.slug
    assert view.comments_count == 1


def test_comments_count_is_recomputed_on_every_call(store, test_post, make_comment) -> None:
    assembler = PostDetailAssembler(store)
    assert assembler.assemble(test_post).comments_count == 0

    make_comment(test_post)

    assert assembler.assemble(test_post).comments_count == 1


def test_comments_count_follows_approval(store, test_post, make_comment) -> None:
    assembler = PostDetailAssembler(store)
    held = make_comment(test_post, is_approved=False)
    assert assembler.assemble(test_post).comments_count == 0

    store.comments.approve(held.id)

    assert assembler.assemble(test_post).comments_count == 1


def test_missing_author_is_an_integrity_error() -> None:
    """Assembly fails loudly instead of returning a post without an author."""
    store = MagicMock()
    store.users.get_by_id.return_value = None
    post = Post(id="p1", author_id="ghost", category_id="c1")

    with pytest.raises(DataIntegrityError):
        PostDetailAssembler(store).assemble(post)
    store.comments.count_for_post.assert_not_called()


def test_missing_category_is_an_integrity_error(store, make_post) -> None:
    post = make_post(category_id="no-such-category")

    with pytest.raises(DataIntegrityError):
        PostDetailAssembler(store).assemble(post)


def test_list_fails_when_a_selected_post_is_unrenderable(store, make_post) -> None:
    make_post()
    make_post(author_id="no-such-author")

    with pytest.raises(DataIntegrityError):
        PostDetailAssembler(store).list_posts()


def test_category_filter_fails_on_unresolvable_category(store, make_post) -> None:
    """A post whose category is gone is an error, not a silent filter miss."""
    make_post()
    make_post(category_id="no-such-category")

    with pytest.raises(DataIntegrityError):
        PostDetailAssembler(store).list_posts(PostFilters(category="ai-llm"))


def test_get_lookups_return_none_when_absent(store) -> None:
    assembler = PostDetailAssembler(store)

    assert assembler.get_by_id("missing") is None
    assert assembler.get_by_slug("missing") is None


def test_sort_uses_published_at_then_created_at(store, make_post) -> None:
    """Effective dates: X = Jan 1 (created), Y = Jan 2 (published) -> [Y, X]."""
    x = make_post(
        slug="post-x",
        created_at=datetime(2025, 1, 1, tzinfo=UTC),
        published_at=None,
    )
    y = make_post(
        slug="post-y",
        created_at=datetime(2025, 1, 5, tzinfo=UTC),
        published_at=datetime(2025, 1, 2, tzinfo=UTC),
    )

    result = PostDetailAssembler(store).list_posts()

    assert [p.id for p in result] == [y.id, x.id]


def test_sort_is_most_recent_first(store, make_post) -> None:
    old = make_post(published_at=datetime(2024, 6, 1, tzinfo=UTC))
    new = make_post(published_at=datetime(2025, 6, 1, tzinfo=UTC))
    middle = make_post(
        created_at=datetime(2025, 1, 1, tzinfo=UTC),
        published_at=None,
    )

    result = PostDetailAssembler(store).list_posts()

    assert [p.id for p in result] == [new.id, middle.id, old.id]


def test_filters_combine_with_and(store, make_post, other_category) -> None:
    """Category and search must both match."""
    both = make_post(title="Running GPT locally")
    category_only = make_post(title="Diffusion models")
    make_post(title="GPT on the server", category_id=other_category.id)

    result = PostDetailAssembler(store).list_posts(
        PostFilters(category="ai-llm", search="gpt")
    )

    ids = [p.id for p in result]
    assert ids == [both.id]
    assert category_only.id not in ids


def test_search_matches_any_text_field_case_insensitively(store, make_post) -> None:
    in_title = make_post(title="About GPT")
    in_excerpt = make_post(excerpt="a gpt primer")
    in_content = make_post(content="... Gpt ...")
    make_post(title="Unrelated")

    result = PostDetailAssembler(store).list_posts(PostFilters(search="gPt"))

    assert {p.id for p in result} == {in_title.id, in_excerpt.id, in_content.id}


def test_status_and_tag_filters(store, make_post) -> None:
    published = make_post(tags=["React", "TypeScript"])
    make_post(tags=["React"], status="draft")
    make_post(tags=["Docker"])

    assembler = PostDetailAssembler(store)
    result = assembler.list_posts(PostFilters(status="published", tag="React"))

    assert [p.id for p in result] == [published.id]


def test_tag_filter_accepts_labels_missing_from_catalog(store, make_post) -> None:
    """Tags are plain labels; the catalog does not have to contain them."""
    post = make_post(tags=["Rust"])

    result = PostDetailAssembler(store).list_posts(PostFilters(tag="Rust"))

    assert [p.id for p in result] == [post.id]


def test_no_status_default_inside_assembler(store, make_post) -> None:
    draft = make_post(status="draft")
    published = make_post(status="published")

    result = PostDetailAssembler(store).list_posts()

    assert {p.id for p in result} == {draft.id, published.id}


def test_unknown_category_slug_gives_empty_list(store, make_post) -> None:
    make_post()

    assert PostDetailAssembler(store).list_posts(PostFilters(category="nope")) == []


def test_each_listed_post_has_its_own_count(store, make_post, make_comment) -> None:
    busy = make_post(published_at=datetime(2025, 2, 1, tzinfo=UTC))
    quiet = make_post(published_at=datetime(2025, 1, 1, tzinfo=UTC))
    make_comment(busy)
    make_comment(busy, minutes=1)

    result = PostDetailAssembler(store).list_posts()

    counts = {p.id: p.comments_count for p in result}
    assert counts == {busy.id: 2, quiet.id: 0}


def test_matches_filters_checks_category_slug() -> None:
    post = Post(
        title="T", excerpt="E", content="C", status="published", tags=["a"],
    )
    category = Category(name="AI/LLM", slug="ai-llm", color="#8B5CF6")

    assert matches_filters(post, None, PostFilters())
    assert matches_filters(post, category, PostFilters(category="ai-llm"))
    assert not matches_filters(post, category, PostFilters(category="backend"))
