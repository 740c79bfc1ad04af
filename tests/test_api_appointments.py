from conftest import auth_headers, date_for, make_consumer, make_practitioner
from wellnesshub.domain.enums import Weekday


def _payload(when=None, start="09:00", end="10:00", **extra):
    body = {
        "practitionerId": "prac-1",
        "date": (when or date_for(Weekday.MONDAY)).isoformat(),
        "timeSlot": {"start": start, "end": end},
        "consultationType": "online",
    }
    body.update(extra)
    return body


def _seed(accounts):
    make_practitioner(accounts, days={Weekday.MONDAY: [("09:00", "10:00")]})
    make_consumer(accounts, "user-c", "Casey Moore")
    make_consumer(accounts, "user-d", "Drew Patel")


def test_first_consumer_wins_the_slot(client, accounts):
    _seed(accounts)

    first = client.post("/appointments", json=_payload(notes="knee pain"), headers=auth_headers("user-c"))
    second = client.post("/appointments", json=_payload(), headers=auth_headers("user-d"))

    assert first.status_code == 201
    body = first.json()
    assert body["success"] is True
    assert body["message"] == "Appointment created successfully"
    assert body["data"]["status"] == "pending"
    assert body["data"]["consumerId"] == "user-c"
    assert body["data"]["timeSlot"] == {"start": "09:00", "end": "10:00"}
    assert accounts.slot("prac-1", Weekday.MONDAY, "09:00", "10:00").is_booked is True

    assert second.status_code == 400
    assert second.json()["message"] == "Time slot not available"
    assert second.json()["error"] == "SLOT_NOT_AVAILABLE"


def test_iso_datetime_date_is_accepted(client, accounts):
    _seed(accounts)
    when = date_for(Weekday.MONDAY).isoformat() + "T00:00:00.000Z"

    response = client.post("/appointments", json=_payload(date=when), headers=auth_headers("user-c"))

    assert response.status_code == 201
    assert response.json()["data"]["date"] == date_for(Weekday.MONDAY).isoformat()


def test_day_not_offered(client, accounts):
    _seed(accounts)
    response = client.post(
        "/appointments", json=_payload(when=date_for(Weekday.TUESDAY)), headers=auth_headers("user-c")
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Practitioner not available on selected day"


def test_unknown_practitioner_is_404(client, accounts):
    _seed(accounts)
    response = client.post("/appointments", json=_payload(practitionerId="nope"), headers=auth_headers("user-c"))
    assert response.status_code == 404
    assert response.json()["message"] == "Practitioner not found"


def test_missing_fields(client, accounts):
    _seed(accounts)
    response = client.post("/appointments", json={"practitionerId": "prac-1"}, headers=auth_headers("user-c"))

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "INVALID_INPUT"
    assert body["message"] == "Missing required fields"


def test_bad_time_format(client, accounts):
    _seed(accounts)
    response = client.post("/appointments", json=_payload(start="9am"), headers=auth_headers("user-c"))
    assert response.status_code == 400


def test_practitioner_cannot_book(client, accounts):
    _seed(accounts)
    response = client.post("/appointments", json=_payload(), headers=auth_headers("prac-1", role="practitioner"))
    assert response.status_code == 403


def test_booking_is_rate_limited(client, accounts):
    _seed(accounts)
    headers = auth_headers("user-c")

    statuses = [
        client.post("/appointments", json=_payload(practitionerId="nope"), headers=headers).status_code
        for _ in range(10)
    ]
    limited = client.post("/appointments", json=_payload(), headers=headers)

    assert statuses == [404] * 10
    assert limited.status_code == 429
    assert int(limited.headers["Retry-After"]) >= 1
    # another consumer has their own budget
    other = client.post("/appointments", json=_payload(), headers=auth_headers("user-d"))
    assert other.status_code == 201


def test_listings_and_status_updates(client, accounts):
    make_practitioner(
        accounts,
        days={Weekday.MONDAY: [("09:00", "10:00")], Weekday.THURSDAY: [("11:00", "12:00")]},
        professional_title="Physiotherapist",
    )
    make_consumer(accounts, "user-c", "Casey Moore")
    consumer = auth_headers("user-c")
    practitioner = auth_headers("prac-1", role="practitioner")

    late = client.post("/appointments", json=_payload(when=date_for(Weekday.THURSDAY), start="11:00", end="12:00"),
                       headers=consumer).json()["data"]
    early = client.post("/appointments", json=_payload(), headers=consumer).json()["data"]

    mine = client.get("/user/appointments", headers=consumer).json()["data"]
    assert {a["id"] for a in mine} == {late["id"], early["id"]}
    assert mine[0]["date"] >= mine[1]["date"]
    assert mine[0]["practitionerName"] == "Dr. Maya Lin"
    assert mine[0]["professionalTitle"] == "Physiotherapist"

    booked = client.get("/practitioner/appointments", headers=practitioner).json()["data"]
    assert booked[0]["date"] <= booked[1]["date"]
    assert booked[0]["userName"] == "Casey Moore"
    assert booked[0]["userEmail"] == "user-c@example.com"

    confirmed = client.put(
        "/practitioner/appointments",
        json={"appointmentId": early["id"], "status": "confirmed"},
        headers=practitioner,
    )
    assert confirmed.status_code == 200
    assert confirmed.json()["data"]["status"] == "confirmed"

    cancelled = client.put(
        "/practitioner/appointments",
        json={"appointmentId": early["id"], "status": "cancelled"},
        headers=practitioner,
    )
    assert cancelled.json()["data"]["status"] == "cancelled"
    assert accounts.slot("prac-1", Weekday.MONDAY, "09:00", "10:00").is_booked is False

    reconfirm = client.put(
        "/practitioner/appointments",
        json={"appointmentId": early["id"], "status": "confirmed"},
        headers=practitioner,
    )
    assert reconfirm.status_code == 400
    assert reconfirm.json()["error"] == "INVALID_STATUS_TRANSITION"


def test_status_must_be_confirmed_or_cancelled(client, accounts):
    make_practitioner(accounts)
    response = client.put(
        "/practitioner/appointments",
        json={"appointmentId": "a1", "status": "pending"},
        headers=auth_headers("prac-1", role="practitioner"),
    )
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_INPUT"


def test_update_of_unknown_appointment_is_404(client, accounts):
    make_practitioner(accounts)
    response = client.put(
        "/practitioner/appointments",
        json={"appointmentId": "missing", "status": "confirmed"},
        headers=auth_headers("prac-1", role="practitioner"),
    )
    assert response.status_code == 404
    assert response.json()["message"] == "Appointment not found"
