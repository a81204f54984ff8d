import pytest

from app.dependencies import get_upload_guard
from app.domain.enums import JobStatus
from app.main import app
from app.services.upload_guard import UploadGuard


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


# -------------------------
# Public intake
# -------------------------
def test_quote_example_end_to_end(client, quote_payload):
    r = client.post("/api/quote", json=quote_payload)
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True

    stored = client.get(f"/api/admin/quotes/{body['id']}").json()
    assert stored["status"] == "new"
    assert stored["fileUrl"] is None
    assert stored["serviceType"] == "Machining"


def test_quote_validation_error_shape(client, quote_payload):
    quote_payload["email"] = "nope"
    r = client.post("/api/quote", json=quote_payload)
    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert body["code"] == "validation_error"
    assert "email" in body["fields"]
    assert client.get("/api/admin/quotes").json() == []


def test_non_object_body_is_a_validation_error(client):
    r = client.post("/api/contact", json=["hello"])
    assert r.status_code == 400
    assert r.json()["success"] is False


def test_apply_to_open_and_closed_listings(client, make_listing, application_payload):
    open_ = make_listing(status=JobStatus.PUBLISHED)
    draft = make_listing(status=JobStatus.DRAFT)

    ok = client.post("/api/apply", json=application_payload(open_.id))
    assert ok.status_code == 200

    refused = client.post("/api/apply", json=application_payload(draft.id))
    assert refused.status_code == 409
    assert refused.json()["code"] == "listing_not_open"

    missing = client.post("/api/apply", json=application_payload("no-such-listing"))
    assert missing.status_code == 404


def test_contact(client):
    r = client.post(
        "/api/contact",
        json={"name": "Kim", "email": "kim@x.com", "subject": "Hours", "message": "Open Saturday?"},
    )
    assert r.status_code == 200
    [msg] = client.get("/api/admin/messages").json()
    assert msg["id"] == r.json()["id"]


# -------------------------
# Uploads
# -------------------------
def test_upload_and_serve_back(client):
    r = client.post("/api/upload", files={"file": ("drawing.pdf", b"%PDF-1.7", "application/pdf")})
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["filename"] == "drawing.pdf"
    assert body["url"].startswith("http://testserver/files/uploads/")

    served = client.get(body["url"].replace("http://testserver", ""))
    assert served.status_code == 200
    assert served.content == b"%PDF-1.7"


def test_upload_without_file(client):
    r = client.post("/api/upload", data={"other": "x"})
    assert r.status_code == 400
    assert r.json()["fields"] == {"file": "No file received."}


def test_upload_wrong_type(client, local_storage):
    r = client.post("/api/upload", files={"file": ("run.exe", b"MZ", "application/x-msdownload")})
    assert r.status_code == 415
    assert r.json()["code"] == "unsupported_type"
    assert not any(local_storage.base_path.rglob("*.exe"))


@pytest.fixture
def small_guard(local_storage):
    app.dependency_overrides[get_upload_guard] = lambda: UploadGuard(local_storage, max_bytes=1024)
    yield
    app.dependency_overrides.pop(get_upload_guard, None)


def test_upload_too_large(client, small_guard, local_storage):
    r = client.post("/api/upload", files={"file": ("big.png", b"\x89PNG" + b"0" * 2048, "image/png")})
    assert r.status_code == 413
    assert r.json()["code"] == "payload_too_large"
    assert not any(p.is_file() for p in local_storage.base_path.rglob("*"))


def test_unknown_file_is_404(client):
    assert client.get("/files/uploads/2026-01-01/none/x.pdf").status_code == 404


# -------------------------
# Public job board
# -------------------------
def test_public_jobs_only_published(client, make_listing):
    open_ = make_listing(status=JobStatus.PUBLISHED)
    draft = make_listing(status=JobStatus.DRAFT)

    ids = [job["id"] for job in client.get("/api/jobs").json()]
    assert ids == [open_.id]
    assert client.get(f"/api/jobs/{open_.id}").json()["title"]["en"] == "CNC Machinist"
    assert client.get(f"/api/jobs/{draft.id}").status_code == 404


def test_public_settings(client):
    assert client.get("/api/settings").json()["siteName"] == "MANA"


# -------------------------
# Staff: quotes
# -------------------------
def test_quote_status_flow(client, quote_payload):
    quote_id = client.post("/api/quote", json=quote_payload).json()["id"]

    r = client.patch(f"/api/admin/quotes/{quote_id}", json={"status": "in-review"})
    assert r.status_code == 200
    assert r.json()["status"] == "in-review"

    bad = client.patch(f"/api/admin/quotes/{quote_id}", json={"status": "new"})
    assert bad.status_code == 409
    err = bad.json()
    assert err["code"] == "invalid_transition"
    assert (err["current"], err["requested"]) == ("in-review", "new")

    unknown = client.patch(f"/api/admin/quotes/{quote_id}", json={"status": "archived"})
    assert unknown.status_code == 400

    filtered = client.get("/api/admin/quotes", params={"status": "in-review"}).json()
    assert [q["id"] for q in filtered] == [quote_id]


def test_quotes_cannot_be_deleted(client, quote_payload):
    quote_id = client.post("/api/quote", json=quote_payload).json()["id"]
    assert client.delete(f"/api/admin/quotes/{quote_id}").status_code == 405


# -------------------------
# Staff: recruitment
# -------------------------
def test_job_crud_and_delete_guard(client, application_payload):
    created = client.post(
        "/api/admin/jobs",
        json={
            "title": {"en": "Welder"},
            "description": {"en": "MIG and TIG"},
            "department": "Fabrication",
            "jobType": "CONTRACT",
        },
    )
    assert created.status_code == 201
    job = created.json()
    assert job["status"] == "DRAFT"
    assert job["jobType"] == "CONTRACT"

    assert client.post("/api/apply", json=application_payload(job["id"])).status_code == 409

    published = client.patch(f"/api/admin/jobs/{job['id']}", json={"status": "PUBLISHED"})
    assert published.json()["status"] == "PUBLISHED"
    assert client.post("/api/apply", json=application_payload(job["id"])).status_code == 200

    refused = client.delete(f"/api/admin/jobs/{job['id']}")
    assert refused.status_code == 409
    assert refused.json()["code"] == "conflict"


def test_application_review_flow(client, make_listing, application_payload):
    listing = make_listing()
    app_id = client.post("/api/apply", json=application_payload(listing.id)).json()["id"]

    skipped = client.patch(f"/api/admin/applications/{app_id}", json={"status": "HIRED"})
    assert skipped.status_code == 409

    for step in ("REVIEWING", "INTERVIEW", "OFFER", "HIRED"):
        r = client.patch(f"/api/admin/applications/{app_id}", json={"status": step})
        assert r.status_code == 200, r.json()

    noted = client.patch(f"/api/admin/applications/{app_id}", json={"notes": "Starts Monday"})
    assert noted.json()["notes"] == "Starts Monday"
    assert noted.json()["status"] == "HIRED"
    assert noted.json()["jobTitle"]["en"] == "CNC Machinist"

    by_job = client.get("/api/admin/applications", params={"jobId": listing.id}).json()
    assert [a["id"] for a in by_job] == [app_id]

    assert client.delete(f"/api/admin/applications/{app_id}").json() == {"success": True}
    assert client.get(f"/api/admin/applications/{app_id}").status_code == 404


# -------------------------
# Staff: settings
# -------------------------
def test_admin_settings_patch(client):
    r = client.patch("/api/admin/settings", json={"siteName": "Forge", "businessHoursSun": "10:00 - 12:00"})
    assert r.status_code == 200
    assert client.get("/api/settings").json()["businessHoursSun"] == "10:00 - 12:00"


# -------------------------
# Ambient
# -------------------------
def test_request_id_is_echoed(client):
    r = client.get("/health", headers={"X-Request-ID": "abc123"})
    assert r.headers["X-Request-ID"] == "abc123"
    assert client.get("/health").headers["X-Request-ID"]


def test_metrics_count_intake(client, quote_payload):
    client.post("/api/quote", json=quote_payload)
    body = client.get("/metrics").text
    assert 'workshop_intake_total{kind="quote",result="created"}' in body


def test_application_patch_with_current_status_saves_notes(client, make_listing, application_payload):
    app_id = client.post("/api/apply", json=application_payload(make_listing().id)).json()["id"]

    r = client.patch(
        f"/api/admin/applications/{app_id}",
        json={"status": "NEW", "notes": "Call back Tuesday"},
    )
    assert r.status_code == 200
    assert r.json()["status"] == "NEW"
    assert r.json()["notes"] == "Call back Tuesday"
