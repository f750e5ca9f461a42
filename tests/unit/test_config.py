"""Settings validation tests."""

import pytest
from pydantic import ValidationError

from siteops.core.config import Settings


def test_defaults_validate_with_secret_key() -> None:
    settings = Settings(secret_key="k")
    assert settings.cleanup_confirmation_text == "YES"
    assert settings.cleanup_roles == frozenset({"Admin"})


@pytest.mark.parametrize("phrase", [" YES", "YES ", "\tYES\n"])
def test_confirmation_phrase_with_surrounding_whitespace_is_rejected(phrase: str) -> None:
    with pytest.raises(ValidationError, match="surrounding whitespace"):
        Settings(secret_key="k", cleanup_confirmation_text=phrase)


def test_blank_confirmation_phrase_is_rejected() -> None:
    with pytest.raises(ValidationError, match="must not be empty"):
        Settings(secret_key="k", cleanup_confirmation_text="   ")


def test_page_size_above_listing_limit_is_rejected() -> None:
    with pytest.raises(ValidationError, match="firestore_page_size"):
        Settings(secret_key="k", firestore_page_size=301)
