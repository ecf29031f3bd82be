"""Tests for bearer header parsing and ownership checks."""

import pytest
from marketplace.identity.auth.errors import Forbidden, Unauthenticated
from marketplace.identity.auth.gate import ensure_owner, extract_bearer_token
from marketplace.identity.auth.port import Principal


class TestExtractBearerToken:
    def test_well_formed_header(self):
        assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"

    def test_scheme_is_case_insensitive(self):
        assert extract_bearer_token("bearer abc") == "abc"

    @pytest.mark.parametrize("header", [None, "", "   ", "abc.def.ghi", "Basic abc", "Bearer a b"])
    def test_malformed_headers(self, header):
        with pytest.raises(Unauthenticated):
            extract_bearer_token(header)


class TestEnsureOwner:
    def test_same_user_passes(self):
        ensure_owner(Principal(id="u-1", name="U", kind="user"), "u-1")

    def test_other_user_is_forbidden(self):
        with pytest.raises(Forbidden):
            ensure_owner(Principal(id="u-1", name="U", kind="user"), "u-2")
