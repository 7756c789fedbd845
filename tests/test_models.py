"""
Tests for the enumerations and the pagination helpers.
"""

import pytest  # type: ignore

from auth0_management.sources.external.auth0.models import (
    ConnectionStrategy,
    MultifactorProvider,
    Page,
    PromptLanguage,
    PromptName,
    TriggerId,
    UserIdentityProvider,
    parse_paginated,
)


class TestEnums:
    def test_values_are_wire_strings(self):
        assert TriggerId("post-login") is TriggerId.POST_LOGIN
        assert ConnectionStrategy.GOOGLE_OAUTH2.value == "google-oauth2"
        assert ConnectionStrategy.AUTH0_ADLDAP.value == "auth0-adldap"
        assert MultifactorProvider("google-authenticator") is MultifactorProvider.GOOGLE_AUTHENTICATOR

    def test_enums_compare_equal_to_strings(self):
        assert UserIdentityProvider.SAMLP == "samlp"
        assert PromptName("login") == "login"
        assert PromptLanguage("en") == "en"

    def test_identity_provider_has_no_adldap(self):
        with pytest.raises(ValueError):
            UserIdentityProvider("auth0-adldap")


class TestParsePaginated:
    def test_bare_list(self, faker_instance):
        users = [{"user_id": faker_instance.uuid4()} for _ in range(3)]

        page = parse_paginated(users, "users")

        assert page.kind == "list"
        assert page.items == users
        assert page.has_next is False

    def test_offset_envelope(self):
        page = parse_paginated({"roles": [{"id": "r1"}, {"id": "r2"}], "start": 0, "limit": 2, "total": 5}, "roles")

        assert page.kind == "offset"
        assert (page.start, page.limit, page.total) == (0, 2, 5)
        assert page.has_next is True

    def test_last_offset_page(self):
        page = parse_paginated({"roles": [{"id": "r5"}], "start": 4, "limit": 2, "total": 5}, "roles")
        assert page.has_next is False

    def test_checkpoint_envelope(self):
        page = parse_paginated({"sessions": [{"id": "s1"}], "next": "chk2"}, "sessions")

        assert page.kind == "checkpoint"
        assert page.next == "chk2"
        assert page.has_next is True

    def test_last_checkpoint_page(self):
        page = parse_paginated({"sessions": []}, "sessions")

        assert page.kind == "checkpoint"
        assert page.has_next is False

    def test_missing_key(self):
        with pytest.raises(ValueError):
            parse_paginated({"users": []}, "roles")

    def test_page_model_defaults(self):
        assert Page(kind="list").items == []
