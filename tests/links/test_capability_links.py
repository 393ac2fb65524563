import re

import pytest
from flask import Flask

from src.attendance_tracker.attendance_tracker.core.exceptions import LinkGenerationError
from src.attendance_tracker.attendance_tracker.links.builder import (
    CapabilityLinkBuilder,
    parse_capability_link,
    request_origin,
)
from src.attendance_tracker.attendance_tracker.signing.service import SignatureService


def make_builder(origin_resolver=lambda: None):
    signer = SignatureService("STD_")
    return signer, CapabilityLinkBuilder(signer, default_origin="https://school.example/", origin_resolver=origin_resolver)


def test_build_path_format():
    signer, builder = make_builder()
    assert builder.build_path("42") == f"/student-info?id=42&sig={signer.sign('42')}"


def test_build_url_uses_explicit_origin():
    _, builder = make_builder()
    url = builder.build_url(42, "http://localhost:3000")
    assert url.startswith("http://localhost:3000/student-info?id=42&sig=")


def test_build_url_falls_back_to_configured_origin():
    _, builder = make_builder()
    assert builder.build_url("42").startswith("https://school.example/student-info?")


def test_build_url_prefers_ambient_origin():
    _, builder = make_builder(origin_resolver=lambda: "https://admin.example")
    assert builder.build_url("42").startswith("https://admin.example/student-info?")


def test_request_origin_inside_flask_request():
    app = Flask(__name__)
    assert request_origin() is None
    with app.test_request_context("/", base_url="https://live.example"):
        assert request_origin() == "https://live.example"


def test_ids_are_url_encoded():
    signer, builder = make_builder()
    path = builder.build_path("a b&c")
    assert path.startswith("/student-info?id=a%20b%26c&sig=")
    student_id, sig = parse_capability_link(path)
    assert student_id == "a b&c"
    assert signer.verify(student_id, sig)


@pytest.mark.parametrize("bad_id", ["", "   ", None])
def test_empty_id_is_rejected(bad_id):
    _, builder = make_builder()
    with pytest.raises(LinkGenerationError):
        builder.build_url(bad_id)


def test_missing_default_origin_is_a_configuration_error():
    with pytest.raises(ValueError):
        CapabilityLinkBuilder(SignatureService("STD_"), default_origin="")


def test_round_trip_passes_verification():
    signer, builder = make_builder()
    student_id, sig = parse_capability_link(builder.build_url("1234"))
    assert student_id == "1234"
    assert re.fullmatch(r"[0-9a-f]{64}", sig)
    assert signer.verify(student_id, sig)


def test_parse_missing_parameters_gives_blanks():
    assert parse_capability_link("/student-info?id=5") == ("5", "")
    assert parse_capability_link("/student-info") == ("", "")
