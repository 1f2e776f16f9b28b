"""
Unit tests for request descriptors.
"""

import pytest

from edgegrid_client import RequestDescriptor, SignedResult, InvalidRequestError


class TestRequestDescriptor:
    """Test the request descriptor builder."""

    def test_new_defaults(self):
        """Test a new descriptor has no headers, body or max body."""
        request = RequestDescriptor.new("/test/v1/foo")

        assert request.path == "/test/v1/foo"
        assert request.headers is None
        assert request.body is None
        assert request.max_body is None

    @pytest.mark.parametrize("path", ["", "test/v1/foo", "https://host/test"])
    def test_invalid_path(self, path):
        """Test that paths must start with a slash."""
        with pytest.raises(InvalidRequestError):
            RequestDescriptor.new(path)

    def test_chaining(self):
        """Test builder methods chain and keep earlier settings."""
        request = (RequestDescriptor.new("/test?x=1")
                   .with_headers({"X-A": "1"})
                   .with_body(b"payload")
                   .with_max_body(4))

        assert request.path == "/test?x=1"
        assert request.headers == {"X-A": "1"}
        assert request.body == b"payload"
        assert request.max_body == 4

    def test_builder_returns_copies(self):
        """Test that setters leave the original descriptor untouched."""
        base = RequestDescriptor.new("/test")
        with_body = base.with_body(b"data")

        assert base.body is None
        assert with_body.body == b"data"
        assert with_body is not base

    def test_setter_overwrites(self):
        """Test that calling a setter twice keeps the last value."""
        request = (RequestDescriptor.new("/test")
                   .with_body(b"first")
                   .with_body(b"second")
                   .with_max_body(10)
                   .with_max_body(3)
                   .with_headers({"A": "1"})
                   .with_headers({"B": "2"}))

        assert request.body == b"second"
        assert request.max_body == 3
        assert request.headers == {"B": "2"}

    def test_headers_copied(self):
        """Test the descriptor does not follow later changes to the caller's dict."""
        headers = {"X-A": "1"}
        request = RequestDescriptor.new("/test").with_headers(headers)
        headers["X-B"] = "2"

        assert request.headers == {"X-A": "1"}

    def test_header_order_preserved(self):
        """Test headers keep the caller's order."""
        request = RequestDescriptor.new("/test").with_headers({"Z": "1", "A": "2", "M": "3"})

        assert list(request.headers) == ["Z", "A", "M"]

    def test_body_from_string(self):
        """Test string bodies are encoded as UTF-8."""
        request = RequestDescriptor.new("/test").with_body("héllo")

        assert request.body == "héllo".encode("utf-8")

    def test_body_invalid_type(self):
        """Test that non-bytes bodies are rejected."""
        with pytest.raises(InvalidRequestError):
            RequestDescriptor.new("/test").with_body(42)

    def test_constructor_encodes_string_body(self):
        """Test the constructor applies the same body handling as with_body."""
        request = RequestDescriptor("/test", body="hello")

        assert request.body == b"hello"
        assert RequestDescriptor("/test", body=bytearray(b"abc")).body == b"abc"

    def test_constructor_invalid_body(self):
        """Test the constructor rejects bodies that are not bytes or str."""
        with pytest.raises(InvalidRequestError):
            RequestDescriptor("/test", body=42)

    def test_constructor_invalid_headers(self):
        """Test the constructor rejects headers that are not a mapping."""
        with pytest.raises(InvalidRequestError):
            RequestDescriptor("/test", headers=[("X-A", "1")])

    def test_headers_read_only(self):
        """Test headers cannot be changed through the descriptor."""
        source = {"X-A": "1"}
        request = RequestDescriptor("/test", headers=source)
        source["X-B"] = "2"

        assert request.headers == {"X-A": "1"}
        with pytest.raises(TypeError):
            request.headers["X-C"] = "3"

    def test_not_hashable(self):
        """Test descriptors are explicitly unhashable."""
        request = RequestDescriptor.new("/test").with_headers({"A": "1"})

        assert RequestDescriptor.__hash__ is None
        with pytest.raises(TypeError):
            hash(request)

    def test_max_body_zero_allowed(self):
        """Test that zero is a valid max body."""
        assert RequestDescriptor.new("/test").with_max_body(0).max_body == 0

    @pytest.mark.parametrize("max_body", [-1, 1.5, "10", True])
    def test_max_body_invalid(self, max_body):
        """Test that max body must be a non-negative integer."""
        with pytest.raises(InvalidRequestError):
            RequestDescriptor.new("/test").with_max_body(max_body)


class TestSignedResult:
    """Test the signed result value."""

    def test_headers(self):
        """Test headers property exposes the Authorization header."""
        result = SignedResult("EG1-HMAC-SHA256 client_token=a;")

        assert result.headers == {"Authorization": "EG1-HMAC-SHA256 client_token=a;"}
        assert result.body is None
