import pytest
from sqlalchemy import event

from app.schemas.auth import SessionUser
from app.services.feed import get_feed_posts


def session_user(user):
    return SessionUser(id=user.id, username=user.username)


@pytest.fixture
def query_counter(engine):
    statements = []

    def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    event.listen(engine, "before_cursor_execute", before_cursor_execute)
    yield statements
    event.remove(engine, "before_cursor_execute", before_cursor_execute)


def test_anonymous_feed_is_none(db_session, make_user, make_post):
    make_post(make_user())

    assert get_feed_posts(db_session, None) is None


def test_empty_feed(db_session, make_user):
    assert get_feed_posts(db_session, session_user(make_user())) == []


def test_feed_returns_newest_five_posts(db_session, make_user, make_post):
    author = make_user()
    posts = [make_post(author) for _ in range(8)]

    feed = get_feed_posts(db_session, session_user(author))

    assert len(feed) == 5
    assert [item.id for item in feed] == [post.id for post in reversed(posts[-5:])]


def test_feed_like_counts_and_has_liked(db_session, make_user, make_post, make_like):
    alice = make_user("alice")
    bob = make_user("bob")
    carol = make_user("carol")
    popular = make_post(alice)
    quiet = make_post(bob)
    bobs_favorite = make_post(carol)
    make_like(alice, popular)
    make_like(bob, popular)
    make_like(carol, popular)
    make_like(bob, bobs_favorite)

    feed = {item.id: item for item in get_feed_posts(db_session, session_user(bob))}

    assert feed[popular.id].total_like_count == 3
    assert feed[popular.id].user_has_liked is True
    assert feed[quiet.id].total_like_count == 0
    assert feed[quiet.id].user_has_liked is False
    assert feed[bobs_favorite.id].total_like_count == 1
    assert feed[bobs_favorite.id].user_has_liked is True


def test_feed_does_not_join_author(db_session, make_user, make_post):
    author = make_user()
    post = make_post(author)

    feed = get_feed_posts(db_session, session_user(author))

    assert feed[0].author_id == author.id
    assert not hasattr(feed[0], "author")
    assert post.id == feed[0].id


def test_feed_uses_constant_number_of_queries(db_session, make_user, make_post, make_like, query_counter):
    users = [make_user() for _ in range(3)]
    for author in users:
        for _ in range(2):
            post = make_post(author)
            for liker in users:
                make_like(liker, post)
    viewer = session_user(users[0])
    query_counter.clear()

    feed = get_feed_posts(db_session, viewer)

    assert len(feed) == 5
    assert all(item.total_like_count == 3 for item in feed)
    assert len(query_counter) <= 3


def test_feed_endpoint(client, make_user, make_post, make_like, auth_headers):
    author = make_user()
    post = make_post(author, content="hello")
    make_like(author, post)

    response = client.get("/api/posts/feed", headers=auth_headers(author))

    assert response.status_code == 200
    body = response.json()
    assert len(body) == 1
    assert body[0]["content"] == "hello"
    assert body[0]["total_like_count"] == 1
    assert body[0]["user_has_liked"] is True


def test_feed_endpoint_is_null_for_anonymous(client, make_user, make_post):
    make_post(make_user())

    response = client.get("/api/posts/feed")

    assert response.status_code == 200
    assert response.json() is None


def test_author_is_resolved_separately(client, make_user, make_post, auth_headers):
    author = make_user("dana")
    make_post(author)

    feed = client.get("/api/posts/feed", headers=auth_headers(author)).json()
    response = client.get(f"/api/users/{feed[0]['author_id']}")

    assert response.status_code == 200
    assert response.json()["username"] == "dana"
    assert "email" not in response.json()


def test_unknown_author_is_404(client):
    response = client.get("/api/users/404")

    assert response.status_code == 404
