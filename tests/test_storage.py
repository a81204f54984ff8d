import pytest
import boto3
from botocore.stub import ANY, Stubber

from app.config import Settings
from app.core.errors import GatewayError
from app.services.storage import (
    LocalStorage,
    S3Storage,
    get_storage,
    make_key,
    safe_filename,
)


@pytest.mark.parametrize(
    "raw, clean",
    [
        ("drawing.pdf", "drawing.pdf"),
        ("../../etc/passwd", "passwd"),
        ("C:\\Users\\ana\\my cv.pdf", "my_cv.pdf"),
        (".hidden.png", "hidden.png"),
        ("", "file"),
    ],
)
def test_safe_filename(raw, clean):
    assert safe_filename(raw) == clean


def test_make_key_layout():
    key = make_key("uploads/", "my drawing.pdf")
    prefix, day, token, name = key.split("/")
    assert prefix == "uploads"
    assert len(day) == 10
    assert len(token) == 32
    assert name == "my_drawing.pdf"


def test_local_store_roundtrip(local_storage):
    url = local_storage.store(b"hello", "a.pdf")
    assert url.startswith("http://testserver/files/uploads/")

    key = url.split("/files/", 1)[1]
    assert local_storage.exists(key)
    assert local_storage.path_for(key).read_bytes() == b"hello"
    assert local_storage.delete(key) is True
    assert not local_storage.exists(key)
    assert local_storage.delete(key) is False


@pytest.mark.parametrize("key", ["", "/abs/path.pdf", "uploads/../../secret", "dir/"])
def test_local_rejects_bad_keys(local_storage, key):
    with pytest.raises(ValueError):
        local_storage.path_for(key)
    assert local_storage.exists(key) is False


@pytest.fixture
def s3_client():
    return boto3.client("s3", region_name="eu-west-1")


def test_s3_store_puts_object_and_returns_bucket_url(s3_client):
    storage = S3Storage(bucket="workshop-files", region="eu-west-1", client=s3_client)
    with Stubber(s3_client) as stub:
        stub.add_response(
            "put_object",
            {},
            {"Bucket": "workshop-files", "Key": ANY, "Body": b"%PDF", "ContentType": "application/pdf"},
        )
        url = storage.store(b"%PDF", "quote.pdf")
        stub.assert_no_pending_responses()

    assert url.startswith("https://workshop-files.s3.eu-west-1.amazonaws.com/uploads/")
    assert url.endswith("/quote.pdf")


def test_s3_failure_becomes_gateway_error(s3_client):
    storage = S3Storage(bucket="workshop-files", client=s3_client)
    with Stubber(s3_client) as stub:
        stub.add_client_error("put_object", service_error_code="AccessDenied", http_status_code=403)
        with pytest.raises(GatewayError) as exc:
            storage.store(b"x", "a.png")

    assert exc.value.message == "Internal error"
    assert "AccessDenied" in exc.value.detail


def test_s3_exists_maps_404_to_false(s3_client):
    storage = S3Storage(bucket="workshop-files", client=s3_client)
    with Stubber(s3_client) as stub:
        stub.add_client_error("head_object", service_error_code="404", http_status_code=404)
        assert storage.exists("uploads/missing.pdf") is False


def test_get_storage_selects_backend(tmp_path):
    local = get_storage(Settings(storage_backend="local", local_storage_path=str(tmp_path)))
    assert isinstance(local, LocalStorage)

    with pytest.raises(ValueError):
        get_storage(Settings(storage_backend="s3", s3_bucket=None))
    with pytest.raises(ValueError):
        get_storage(Settings(storage_backend="ftp"))
