"""
Property-based tests for masking credentials in database URLs.
"""

import pytest
from hypothesis import given, strategies as st, settings

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../.."))

from mimedb.utils.masking import mask_url, mask_query, safe_url


# Strategies for generating test data
tokens = st.from_regex(r"[a-zA-Z0-9_-]{10,50}", fullmatch=True)
hosts = st.sampled_from(["mirror.example.com", "cdn.jsdelivr.net", "localhost:8080"])
paths = st.sampled_from(["/db.json", "/gh/jshttp/mime-db@master/db.json", "/mime/v1/db.json"])
param_names = st.sampled_from(["token", "access_token", "api_key", "Signature"])


# **Feature: mime-db-resolver, URL Credential Masking**
@given(user=st.sampled_from(["token", "user", "ci"]), token=tokens, host=hosts, path=paths)
@settings(max_examples=200)
def test_mask_url_hides_userinfo(user: str, token: str, host: str, path: str):
    """
    Userinfo credentials never appear in the masked URL; host and path are kept.
    """
    url = f"https://{user}:{token}@{host}{path}"

    masked = mask_url(url)

    assert token not in masked
    assert masked == f"https://***:***@{host}{path}"


# **Feature: mime-db-resolver, Query Credential Masking**
@given(name=param_names, token=tokens, host=hosts, path=paths)
@settings(max_examples=200)
def test_mask_query_hides_sensitive_params(name: str, token: str, host: str, path: str):
    """
    Values of sensitive query parameters are replaced, others are kept.
    """
    url = f"https://{host}{path}?v=2&{name}={token}"

    masked = mask_query(url)

    assert token not in masked
    assert f"{name}=***" in masked
    assert "v=2" in masked


@given(host=hosts, path=paths)
@settings(max_examples=50)
def test_safe_url_keeps_clean_urls(host: str, path: str):
    """
    URLs without credentials are returned unchanged.
    """
    url = f"https://{host}{path}"

    assert safe_url(url) == url


def test_mask_url_at_sign_in_path():
    """An @ after the host belongs to the path, not to userinfo."""
    url = "https://cdn.jsdelivr.net/gh/jshttp/mime-db@master/db.json"

    assert mask_url(url) == url


def test_mask_url_empty():
    """Empty values pass through."""
    assert mask_url("") == ""
    assert mask_query("") == ""


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
