from pathlib import Path

import pytest

from restspec import (
    Attachment,
    HttpMethod,
    MultiValueMap,
    SerializationError,
    with_expected_map_body,
    with_no_body,
)
from restspec._utils import HeaderStore, MultipartResolver
from tests.utils.models import SampleBody


class TestMultipartBuild:
    def test_form_data(self, text_file: Path):
        request = (
            with_expected_map_body()
            .uri("http://localhost:8080/upload")
            .post()
            .add_param("description", "report")
            .add_file("file", text_file)
            .build()
        )

        assert request.method == HttpMethod.POST
        assert request.content_type == "multipart/form-data"
        assert request.is_multipart
        assert str(request.uri) == "http://localhost:8080/upload"
        assert request.payload["description"] == ["report"]
        assert request.payload["file"] == [Attachment.from_path(text_file)]

    def test_mixed(self, text_file: Path, sample_body: SampleBody):
        request = (
            with_no_body()
            .uri("http://localhost:8080/upload")
            .put()
            .add_file("file", text_file)
            .body(sample_body)
            .build()
        )

        assert request.content_type == "multipart/mixed"
        assert request.payload["body"] == ['{"id":"testId","list":["a","b","c"]}']
        assert list(request.payload) == ["file", "body"]

    def test_preset_multipart_type_is_kept(self, text_file: Path):
        request = (
            with_no_body()
            .uri("http://localhost/upload")
            .post()
            .content_type("multipart/related")
            .add_file("file", text_file)
            .body({"x": 1})
            .build()
        )

        assert request.content_type == "multipart/related"
        assert request.headers.get_list("Content-Type") == ["multipart/related"]

    def test_non_multipart_type_is_replaced(self, text_file: Path):
        request = (
            with_no_body()
            .uri("http://localhost/upload")
            .post()
            .content_type("application/json")
            .add_file("file", text_file)
            .build()
        )

        assert request.headers.get_list("Content-Type") == ["multipart/form-data"]

    def test_build_leaves_the_builder_reusable(self, text_file: Path):
        spec = (
            with_no_body()
            .uri("http://localhost/upload")
            .post()
            .content_type("application/json")
            .add_file("file", text_file)
        )

        spec.build()
        request = spec.content_type(None).add_param("k", "v").build()

        assert request.content_type == "multipart/form-data"
        assert "body" not in request.payload

    def test_attachment_from_bytes(self):
        attachment = Attachment.from_bytes(b"a,b\n1,2\n", "data.csv")
        request = (
            with_no_body()
            .uri("http://localhost/upload")
            .patch()
            .add_file("data", attachment)
            .build()
        )

        assert request.payload.get_first("data") is attachment
        assert attachment.media_type == "text/csv"

    def test_unserializable_body_fails_at_build(self, text_file: Path):
        spec = (
            with_no_body()
            .uri("http://localhost/upload")
            .post()
            .add_file("file", text_file)
            .body(object())
        )

        with pytest.raises(SerializationError) as exc_info:
            spec.build()

        assert exc_info.value.body_type is object

    def test_unserializable_body_without_files_is_kept(self):
        body = object()
        request = with_no_body().uri("http://localhost").post().body(body).build()

        assert request.payload is body

    def test_none_file(self):
        spec = with_no_body().uri("http://localhost").post()

        with pytest.raises(ValueError):
            spec.add_file("file", None)  # type: ignore[arg-type]


class TestMultipartResolver:
    def _resolver(self, parameters=None, body=None, multipart=False):
        from httpx import URL

        headers = HeaderStore()
        headers.set("Content-Type", "application/json")
        return (
            headers,
            parameters,
            MultipartResolver(
                uri=URL("http://localhost/upload"),
                headers=headers,
                parameters=parameters,
                body=body,
                multipart=multipart,
            ),
        )

    def test_attachment_value_triggers_multipart(self):
        params = MultiValueMap({"file": [Attachment.from_bytes(b"x", "x.bin")]})
        headers, _, resolver = self._resolver(params)

        resolved = resolver.resolve()

        assert resolved.multipart
        assert resolved.headers.content_type == "multipart/form-data"
        assert headers.content_type == "application/json"

    def test_multipart_flag_without_parameters(self):
        _, _, resolver = self._resolver(multipart=True, body={"a": 1})

        resolved = resolver.resolve()

        assert resolved.payload == {"body": ['{"a":1}']}
        assert resolved.headers.content_type == "multipart/mixed"

    def test_resolving_twice_gives_the_same_payload(self):
        params = MultiValueMap({"k": ["v"]})
        _, _, resolver = self._resolver(params, body="text", multipart=True)

        first = resolver.resolve()
        second = resolver.resolve()

        assert params == {"k": ["v"]}
        assert first.payload == {"k": ["v"], "body": ['"text"']}
        assert second.payload == first.payload
