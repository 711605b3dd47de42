from staff_portal.models import Notification


def add_notifications(db, user, count, read=False):
    rows = [
        Notification(
            user_id=user.id,
            message="Your transfer request has been approved",
            type="transfer_approved",
            request_id=i + 1,
            request_type="transfer",
            read=read,
        )
        for i in range(count)
    ]
    db.add_all(rows)
    db.commit()
    return rows


def test_list_own_notifications(client_for, make_user, db):
    me, other = make_user(), make_user()
    add_notifications(db, me, 2)
    add_notifications(db, other, 3)

    body = client_for(me).get("/notifications").json()
    assert len(body) == 2
    assert {n["userId"] for n in body} == {me.id}
    assert body[0]["requestType"] == "transfer"
    assert body[0]["read"] is False


def test_mark_one_read_leaves_siblings(client_for, make_user, db):
    me = make_user()
    first, second = add_notifications(db, me, 2)

    resp = client_for(me).patch(f"/notifications/{first.id}/read")
    assert resp.json() == {"success": True}

    db.expire_all()
    assert db.get(Notification, first.id).read is True
    assert db.get(Notification, second.id).read is False


def test_cannot_mark_someone_elses_notification(client_for, make_user, db):
    me, other = make_user(), make_user()
    (theirs,) = add_notifications(db, other, 1)

    assert client_for(me).patch(f"/notifications/{theirs.id}/read").status_code == 404
    assert client_for(me).patch("/notifications/9999/read").status_code == 404
    db.expire_all()
    assert db.get(Notification, theirs.id).read is False


def test_mark_all_read_is_scoped_to_caller(client_for, make_user, db):
    me, other = make_user(), make_user()
    add_notifications(db, me, 3)
    add_notifications(db, other, 2)
    c = client_for(me)

    assert c.get("/notifications/unread-count").json() == {"count": 3}
    assert c.post("/notifications/mark-all-read").json() == {"success": True}
    assert c.get("/notifications/unread-count").json() == {"count": 0}

    db.expire_all()
    assert all(n.read for n in db.query(Notification).filter_by(user_id=me.id))
    assert not any(n.read for n in db.query(Notification).filter_by(user_id=other.id))


def test_notifications_require_session(client):
    assert client.get("/notifications").status_code == 401
    assert client.patch("/notifications/1/read").status_code == 401
    assert client.post("/notifications/mark-all-read").status_code == 401
