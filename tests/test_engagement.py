from __future__ import annotations

import pytest

from quillblog import crud, schemas
from quillblog.core.errors import DuplicateEngagement, NotFound
from quillblog.models import Comment, Like

from tests.conftest import auth_header, make_post


def test_insert_like_reports_duplicate(db, alice) -> None:
    post = make_post(db, alice)
    assert crud.insert_like(db, post.id, "1.2.3.4") is crud.LikeOutcome.CREATED
    assert crud.insert_like(db, post.id, "1.2.3.4") is crud.LikeOutcome.DUPLICATE
    assert db.query(Like).count() == 1


def test_like_twice_from_same_address_is_rejected(db, alice) -> None:
    post = make_post(db, alice)
    crud.like_post(db, post.id, "1.2.3.4")
    with pytest.raises(DuplicateEngagement):
        crud.like_post(db, post.id, "1.2.3.4")
    assert crud.get_like_count(db, post.id) == 1


def test_likes_from_distinct_addresses_both_count(db, alice) -> None:
    post = make_post(db, alice)
    crud.like_post(db, post.id, "1.2.3.4")
    crud.like_post(db, post.id, "5.6.7.8")
    assert crud.get_like_count(db, post.id) == 2


def test_same_address_may_like_different_posts(db, alice) -> None:
    first = make_post(db, alice, title="a")
    second = make_post(db, alice, title="b")
    crud.like_post(db, first.id, "1.2.3.4")
    crud.like_post(db, second.id, "1.2.3.4")
    assert db.query(Like).count() == 2


def test_like_missing_post_raises_not_found(db) -> None:
    with pytest.raises(NotFound):
        crud.like_post(db, 404, "1.2.3.4")


def test_comment_on_missing_post_raises_not_found(db) -> None:
    with pytest.raises(NotFound):
        crud.create_comment(db, 404, schemas.CommentCreate(author="A", email="a@example.com", content="x"))
    assert db.query(Comment).count() == 0


def test_get_comments_for_missing_post_is_empty(db) -> None:
    assert crud.get_comments(db, 404) == []


def test_comment_fields_are_trimmed() -> None:
    comment = schemas.CommentCreate(author="  Ann ", email="ann@example.com", content="  hello  ")
    assert comment.author == "Ann"
    assert comment.content == "hello"


# HTTP surface


def test_api_like_scenario(client, db, alice) -> None:
    post = make_post(db, alice)
    client.get(f"/api/posts/{post.id}")

    first = client.post(f"/api/posts/{post.id}/like")
    assert first.status_code == 200
    assert first.json()["message"] == "Post liked successfully"

    second = client.post(f"/api/posts/{post.id}/like")
    assert second.status_code == 400
    assert second.json()["detail"] == "Already liked this post"

    body = client.get(f"/api/posts/{post.id}").json()
    assert body["likes"] == 1
    assert body["views"] == 2


def test_api_like_missing_post(client) -> None:
    assert client.post("/api/posts/999/like").status_code == 404


def test_api_add_and_list_comments(client, db, alice) -> None:
    post = make_post(db, alice)
    for text in ("first", "second"):
        resp = client.post(
            f"/api/posts/{post.id}/comments",
            json={"author": "Reader", "email": "reader@example.com", "content": text},
        )
        assert resp.status_code == 201
        assert isinstance(resp.json()["commentId"], int)

    comments = client.get(f"/api/posts/{post.id}/comments").json()
    assert [c["content"] for c in comments] == ["second", "first"]
    assert set(comments[0]) == {"id", "author", "email", "content", "createdAt"}

    listing = client.get("/api/posts").json()
    assert listing[0]["comments"] == 2


def test_api_comment_with_invalid_email_is_rejected(client, db, alice) -> None:
    post = make_post(db, alice)
    resp = client.post(
        f"/api/posts/{post.id}/comments",
        json={"author": "Reader", "email": "not-an-email", "content": "hi"},
    )
    assert resp.status_code == 400
    assert [e["field"] for e in resp.json()["errors"]] == ["email"]
    assert db.query(Comment).count() == 0


def test_api_comment_with_blank_author_and_content(client, db, alice) -> None:
    post = make_post(db, alice)
    resp = client.post(
        f"/api/posts/{post.id}/comments",
        json={"author": "   ", "email": "reader@example.com", "content": ""},
    )
    assert resp.status_code == 400
    assert {e["field"] for e in resp.json()["errors"]} == {"author", "content"}


def test_api_comment_on_missing_post(client) -> None:
    resp = client.post(
        "/api/posts/999/comments",
        json={"author": "Reader", "email": "reader@example.com", "content": "hi"},
    )
    assert resp.status_code == 404


def test_api_list_comments_for_missing_post(client) -> None:
    resp = client.get("/api/posts/999/comments")
    assert resp.status_code == 200
    assert resp.json() == []


def test_api_delete_removes_engagement(client, db, alice) -> None:
    post = make_post(db, alice)
    client.post(f"/api/posts/{post.id}/like")
    client.post(
        f"/api/posts/{post.id}/comments",
        json={"author": "Reader", "email": "reader@example.com", "content": "hi"},
    )
    assert client.delete(f"/api/posts/{post.id}", headers=auth_header(alice)).status_code == 200

    assert client.get(f"/api/posts/{post.id}/comments").json() == []
    assert db.query(Like).count() == 0
    assert db.query(Comment).count() == 0
