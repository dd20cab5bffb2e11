from clubhub.models.event_model import Event
from clubhub.models.payment_model import Payment
from clubhub.models.registration_model import EventRegistration


def _order(client, slug, headers, payload):
    return client.post(f"/api/events/{slug}/payment-order", json=payload, headers=headers)


def test_payment_order_requires_login(client, make_event, registration_payload):
    _, slug = make_event("Paid Bootcamp", is_paid=True, price=500)
    assert _order(client, slug, {}, registration_payload()).status_code == 401


def test_free_event_rejects_payment_order(client, make_event, user_headers, registration_payload):
    _, slug = make_event("Free Talk")
    response = _order(client, slug, user_headers, registration_payload())
    assert response.status_code == 400


def test_payment_order_is_pending_bookkeeping(client, make_event, user_headers, store, registration_payload):
    event_id, slug = make_event("Paid Bootcamp", is_paid=True, price=500)
    response = _order(client, slug, user_headers, registration_payload())
    assert response.status_code == 201
    body = response.json()
    assert body["orderId"].startswith("order_")
    assert body["amount"] == 500
    assert body["currency"] == "INR"

    session = store.session()
    payment = session.query(Payment).first()
    assert payment.status == "pending"
    assert payment.user_name == "Asha Verma"
    assert payment.registration_no == "12345ABC"
    assert payment.user_email == "student@club.test"
    assert session.query(EventRegistration).count() == 0
    assert session.get(Event, event_id).registration_count == 0
    session.close()


def test_successful_payment_creates_registration(client, make_event, user_headers, admin_headers, store,
                                                 registration_payload):
    event_id, slug = make_event("Paid Bootcamp", is_paid=True, price=500)
    order_id = _order(client, slug, user_headers, registration_payload()).json()["orderId"]

    response = client.put(f"/api/payments/{order_id}", json={"status": "success", "paymentId": "pay_1"},
                          headers=admin_headers)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "success"
    assert data["paymentId"] == "pay_1"
    assert data["paidAt"] is not None

    session = store.session()
    registration = session.query(EventRegistration).one()
    assert registration.payment_status == "completed"
    assert registration.payment.order_id == order_id
    assert session.get(Event, event_id).registration_count == 1
    session.close()

    checked = client.get(f"/api/events/{slug}/check-registration", headers=user_headers).json()
    assert checked["isRegistered"] is True

    again = client.put(f"/api/payments/{order_id}", json={"status": "failed"}, headers=admin_headers)
    assert again.status_code == 400


def test_failed_payment_leaves_no_registration(client, make_event, user_headers, admin_headers, store,
                                               registration_payload):
    _, slug = make_event("Paid Bootcamp", is_paid=True, price=500)
    order_id = _order(client, slug, user_headers, registration_payload()).json()["orderId"]
    response = client.put(f"/api/payments/{order_id}", json={"status": "failed"}, headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["data"]["status"] == "failed"

    session = store.session()
    assert session.query(EventRegistration).count() == 0
    session.close()


def test_settle_validates_status_and_order(client, admin_headers):
    assert client.put("/api/payments/order_missing", json={"status": "success"},
                      headers=admin_headers).status_code == 404
    response = client.put("/api/payments/order_missing", json={"status": "refunded"}, headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["fields"] == ["status"]


def test_payment_history_is_admin_only(client, make_event, user_headers, admin_headers, registration_payload):
    _, slug = make_event("Paid Bootcamp", is_paid=True, price=500, location=None)
    _order(client, slug, user_headers, registration_payload())

    assert client.get("/api/payments/history", headers=user_headers).status_code == 403

    response = client.get("/api/payments/history", headers=admin_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 1
    payment = body["payments"][0]
    assert payment["event"]["title"] == "Paid Bootcamp"
    assert payment["event"]["location"] == "TBA"
    assert payment["status"] == "pending"
