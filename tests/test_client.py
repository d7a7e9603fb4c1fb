import json
from datetime import date

import httpx
import pytest
from pydantic import ValidationError

from job_capture.client import (
    NotAuthenticatedError,
    SaveApplicationError,
    TrackerClient,
    TrackerConnectionError,
    TrackerError,
)
from job_capture.models import ApplicationPayload, JobRecord


def _record(**overrides) -> JobRecord:
    data = dict(
        source="Lever",
        company_name="Acme",
        position="Data Engineer",
        location="Remote",
        department="Engineering",
        url="https://jobs.lever.co/acme/1",
    )
    data.update(overrides)
    return JobRecord(**data)


def _client(handler, **kwargs) -> TrackerClient:
    return TrackerClient("https://tracker.example.com/", transport=httpx.MockTransport(handler), **kwargs)


def test_payload_from_record():
    payload = ApplicationPayload.from_record(_record())
    body = payload.to_json()
    assert body == {
        "companyName": "Acme",
        "position": "Data Engineer",
        "location": "Remote",
        "department": "Engineering",
        "notes": "Applied via Lever",
        "status": "applied",
        "applicationDate": date.today().isoformat(),
        "jobUrl": "https://jobs.lever.co/acme/1",
    }


def test_payload_custom_notes():
    assert ApplicationPayload.from_record(_record(), notes="Referral").notes == "Referral"


def test_payload_requires_company_and_position():
    with pytest.raises(ValidationError):
        ApplicationPayload.from_record(_record(company_name=""))
    with pytest.raises(ValidationError):
        ApplicationPayload.from_record(_record(position=""))


def test_save_application_posts_json():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(201, json={"id": 7, "companyName": "Acme"})

    created = _client(handler).save_application(ApplicationPayload.from_record(_record()))
    assert created == {"id": 7, "companyName": "Acme"}
    assert seen["method"] == "POST"
    assert seen["url"] == "https://tracker.example.com/api/applications"
    assert seen["body"]["companyName"] == "Acme"
    assert seen["body"]["status"] == "applied"


def test_save_application_empty_body():
    client = _client(lambda request: httpx.Response(200))
    assert client.save_application(ApplicationPayload.from_record(_record())) == {}


def test_unauthenticated():
    client = _client(lambda request: httpx.Response(401, json={"message": "Unauthorized"}))
    with pytest.raises(NotAuthenticatedError):
        client.save_application(ApplicationPayload.from_record(_record()))


def test_other_failures():
    client = _client(lambda request: httpx.Response(400, json={"message": "Invalid"}))
    with pytest.raises(SaveApplicationError) as excinfo:
        client.save_application(ApplicationPayload.from_record(_record()))
    assert excinfo.value.status_code == 400


def test_rate_limit_is_retried():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if len(calls) == 1:
            return httpx.Response(429)
        return httpx.Response(201, json={"id": 1})

    client = _client(handler, backoff_s=0)
    assert client.save_application(ApplicationPayload.from_record(_record())) == {"id": 1}
    assert len(calls) == 2


def test_rate_limit_gives_up():
    client = _client(lambda request: httpx.Response(429), max_retries=1, backoff_s=0)
    with pytest.raises(SaveApplicationError) as excinfo:
        client.save_application(ApplicationPayload.from_record(_record()))
    assert excinfo.value.status_code == 429


def test_connection_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TrackerConnectionError):
        _client(handler).save_application(ApplicationPayload.from_record(_record()))


def test_server_url_required():
    with pytest.raises(TrackerError):
        TrackerClient("")
