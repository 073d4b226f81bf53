from pghub.models import Post, Attachment
from pghub.repositories.post_repository import PostRepository


def _post(title="Room to let", attachments=()):
    post = Post(title=title, content="Bright room, close to campus.")
    for name in attachments:
        post.attachments.append(Attachment(file_name=name))
    return post


def test_create_stores_one_attachment_per_file_name(db_session):
    repo = PostRepository(db_session)

    created = repo.create(_post(attachments=["a.jpg", "b.jpg", "c.pdf"]))

    stored = repo.get_by_id(created.id)
    assert [a.file_name for a in stored.attachments] == ["a.jpg", "b.jpg", "c.pdf"]
    assert all(a.id for a in stored.attachments)
    assert len({a.id for a in stored.attachments}) == 3
    assert stored.created_at is not None


def test_get_by_id_returns_none_for_unknown_id(db_session):
    assert PostRepository(db_session).get_by_id("does-not-exist") is None


def test_get_page_splits_posts_into_pages(db_session):
    repo = PostRepository(db_session)
    ids = {repo.create(_post(title=f"Post {i}")).id for i in range(5)}

    pages = [repo.get_page(page_number, 2) for page_number in (1, 2, 3, 4)]

    assert [len(page) for page in pages] == [2, 2, 1, 0]
    assert {post.id for page in pages for post in page} == ids


def test_update_replaces_the_whole_attachment_set(db_session):
    repo = PostRepository(db_session)
    created = repo.create(_post(attachments=["a.jpg", "b.jpg", "c.jpg"]))
    old_ids = {a.id for a in created.attachments}

    updated = repo.update(created.id, _post(title="New title", attachments=["d.jpg"]))

    assert updated.title == "New title"
    assert [a.file_name for a in updated.attachments] == ["d.jpg"]
    assert updated.attachments[0].id not in old_ids
    assert repo.count_attachments(created.id) == 1


def test_update_unknown_post_returns_none(db_session):
    assert PostRepository(db_session).update("missing", _post()) is None


def test_delete_removes_post_and_attachments(db_session):
    repo = PostRepository(db_session)
    created = repo.create(_post(attachments=["a.jpg", "b.jpg"]))

    assert repo.delete(created.id) is True
    assert repo.get_by_id(created.id) is None
    assert db_session.query(Attachment).count() == 0


def test_delete_unknown_post_returns_false(db_session):
    assert PostRepository(db_session).delete("missing") is False
