"""Tests for the GraphQL transport client (mocked HTTP session)."""

from unittest.mock import patch, MagicMock
import json
import logging
import pytest
import requests
from pydantic import BaseModel

from humio_provider.base.config import validate_config
from humio_provider.base.exceptions import GraphQLError, HTTPStatusError, TransportError
from humio_provider.graphql.client import GraphQLClient, operation_name

QUERY = "query ListRepositories { repositories { id name } }"


def _response(status: int = 200, payload=None, text: str | None = None) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    resp.json.return_value = payload
    resp.text = text if text is not None else json.dumps(payload)
    return resp


@pytest.fixture
def svc(humio_config):
    with patch("humio_provider.graphql.client.requests.Session") as mock_session_cls:
        session = MagicMock()
        session.headers = {}
        mock_session_cls.return_value = session
        client = GraphQLClient(validate_config(humio_config))
        yield client, session


class _Repos(BaseModel):
    repositories: list[dict]


# --- request construction ---

class TestRequest:
    def test_bearer_header(self, svc):
        _, session = svc
        assert session.headers["Authorization"] == "Bearer secret-token"
        assert session.headers["Content-Type"] == "application/json"

    def test_posts_to_graphql_endpoint(self, svc):
        client, session = svc
        session.post.return_value = _response(payload={"data": {"repositories": []}})
        client.query(QUERY, {"RepositoryName": "r"})
        session.post.assert_called_once_with(
            "https://humio.test/graphql",
            json={"query": QUERY, "variables": {"RepositoryName": "r"}},
        )

    def test_empty_variables_omitted(self, svc):
        client, session = svc
        session.post.return_value = _response(payload={"data": {}})
        client.query(QUERY)
        assert session.post.call_args[1]["json"] == {"query": QUERY}

    def test_ca_certificate_sets_verify(self, tmp_path):
        bundle = tmp_path / "ca.pem"
        bundle.write_text("-----BEGIN CERTIFICATE-----\n")
        with patch("humio_provider.graphql.client.requests.Session") as mock_session_cls:
            session = MagicMock()
            session.headers = {}
            mock_session_cls.return_value = session
            GraphQLClient(validate_config({
                "address": "https://humio.test",
                "api_token": "t",
                "ca_certificate_path": str(bundle),
            }))
        assert session.verify == str(bundle)


# --- response handling ---

class TestResponse:
    def test_returns_data(self, svc):
        client, session = svc
        session.post.return_value = _response(payload={"data": {"repositories": [{"id": "1", "name": "a"}]}})
        assert client.query(QUERY) == {"repositories": [{"id": "1", "name": "a"}]}

    def test_null_data_is_empty_dict(self, svc):
        client, session = svc
        session.post.return_value = _response(payload={"data": None})
        assert client.query(QUERY) == {}

    def test_decodes_into_target(self, svc):
        client, session = svc
        session.post.return_value = _response(payload={"data": {"repositories": [{"id": "1"}]}})
        result = client.query(QUERY, None, _Repos)
        assert isinstance(result, _Repos)
        assert result.repositories == [{"id": "1"}]

    def test_target_mismatch(self, svc):
        client, session = svc
        session.post.return_value = _response(payload={"data": {"other": 1}})
        with pytest.raises(TransportError, match="unmarshal data"):
            client.query(QUERY, None, _Repos)


# --- failures ---

class TestFailures:
    def test_non_200(self, svc):
        client, session = svc
        session.post.return_value = _response(status=401, payload=None, text="Unauthorized")
        with pytest.raises(HTTPStatusError) as exc:
            client.query(QUERY)
        assert exc.value.status_code == 401
        assert "Unauthorized" in str(exc.value)

    def test_network_error(self, svc):
        client, session = svc
        session.post.side_effect = requests.ConnectionError("refused")
        with pytest.raises(TransportError, match="refused"):
            client.query(QUERY)

    def test_invalid_json(self, svc):
        client, session = svc
        resp = _response(text="<html>")
        resp.json.side_effect = ValueError("Expecting value")
        session.post.return_value = resp
        with pytest.raises(TransportError, match="unmarshal response"):
            client.query(QUERY)

    def test_all_errors_concatenated(self, svc):
        client, session = svc
        session.post.return_value = _response(payload={
            "data": None,
            "errors": [
                {"message": "first problem", "path": ["createAlert"]},
                {"message": "second problem", "extensions": {"field": "name"}},
            ],
        })
        with pytest.raises(GraphQLError) as exc:
            client.query(QUERY)
        assert str(exc.value) == "GraphQL errors: first problem; second problem"
        assert exc.value.messages == ["first problem", "second problem"]
        assert exc.value.errors[0]["path"] == ["createAlert"]
        assert exc.value.errors[1]["extensions"] == {"field": "name"}

    def test_errors_never_populate_target(self, svc):
        client, session = svc
        session.post.return_value = _response(payload={
            "data": {"repositories": [{"id": "1"}]},
            "errors": [{"message": "partial failure"}],
        })
        target = MagicMock()
        with pytest.raises(GraphQLError):
            client.query(QUERY, None, target)
        target.model_validate.assert_not_called()


class TestOperationName:
    def test_query(self):
        assert operation_name(QUERY) == "ListRepositories"

    def test_mutation_with_leading_whitespace(self):
        assert operation_name("\nmutation CreateAlert($Name: String!) { x }") == "CreateAlert"

    def test_anonymous(self):
        assert operation_name("{ currentUser { id } }") == "anonymous"


class TestFailureLogging:
    def test_invalid_json_logged(self, svc, caplog):
        client, session = svc
        resp = _response(text="<html>")
        resp.json.side_effect = ValueError("Expecting value")
        session.post.return_value = resp
        with caplog.at_level(logging.ERROR, logger="humio_provider"):
            with pytest.raises(TransportError):
                client.query(QUERY)
        record = caplog.records[-1]
        assert record.getMessage().startswith("failed to unmarshal response")
        assert record.operation == "ListRepositories"
        assert record.resource == "graphql"

    def test_target_mismatch_logged(self, svc, caplog):
        client, session = svc
        session.post.return_value = _response(payload={"data": {"other": 1}})
        with caplog.at_level(logging.ERROR, logger="humio_provider"):
            with pytest.raises(TransportError):
                client.query(QUERY, None, _Repos)
        record = caplog.records[-1]
        assert record.getMessage().startswith("failed to unmarshal data")
        assert record.levelno == logging.ERROR

    def test_status_error_logged(self, svc, caplog):
        client, session = svc
        session.post.return_value = _response(status=503, payload=None, text="down")
        with caplog.at_level(logging.ERROR, logger="humio_provider"):
            with pytest.raises(HTTPStatusError):
                client.query(QUERY)
        assert caplog.records[-1].getMessage() == "unexpected status code 503"
