import copy

import pytest
from pydantic import ValidationError

from oauth_validation.models.clients import (
    ClusterRoleRestriction,
    ExactValuesRestriction,
    OAuthClient,
    OAuthClientAuthorization,
    ScopeRestriction,
)
from oauth_validation.models.tokens import OAuthAuthorizeToken


class TestWireFormat:
    def test_authorize_token_loads_camel_case_wire_names(self):
        # Arrange
        wire = {
            "metadata": {"name": "x" * 32, "resourceVersion": "7"},
            "clientName": "myclient",
            "userName": "bob",
            "userUID": "bob-uid",
            "scopes": ["user:info"],
            "redirectURI": "https://example.com/cb",
            "codeChallenge": "c" * 43,
            "codeChallengeMethod": "plain",
        }
        original = copy.deepcopy(wire)

        # Act
        token = OAuthAuthorizeToken.from_wire(wire)

        # Assert
        assert token.user_uid == "bob-uid"
        assert token.redirect_uri == "https://example.com/cb"
        assert token.code_challenge_method == "plain"
        assert token.metadata.resource_version == "7"
        assert wire == original

    def test_to_wire_uses_camel_case_names(self):
        # Arrange
        client = OAuthClient(redirect_uris=["https://a"], grant_method="auto")

        # Act
        wire = client.to_wire()

        # Assert
        assert wire["redirectURIs"] == ["https://a"]
        assert wire["grantMethod"] == "auto"
        assert "redirect_uris" not in wire

    def test_models_are_frozen(self, client_authorization):
        with pytest.raises(ValidationError):
            client_authorization.user_uid = "other"

    def test_client_authorization_name(self):
        assert OAuthClientAuthorization.name_for("bob", "app") == "bob:app"


class TestScopeRestriction:
    def test_exact_constructor_builds_literals_variant(self):
        # Act
        restriction = ScopeRestriction.exact("user:info", "user:check-access")

        # Assert
        assert restriction.populated() == ["literals"]
        assert restriction.variant() == ExactValuesRestriction(("user:info", "user:check-access"))

    def test_cluster_role_constructor_builds_cluster_role_variant(self):
        # Act
        restriction = ScopeRestriction.for_cluster_role(["view"], ["*"], allow_escalation=True)

        # Assert
        assert restriction.variant() == ClusterRoleRestriction(("view",), ("*",), True)

    def test_of_round_trips_a_variant(self):
        variant = ClusterRoleRestriction(("edit",), ("ns1",))
        assert ScopeRestriction.of(variant).variant() == variant

    def test_wire_form_with_both_variants_has_no_variant(self):
        # Arrange
        restriction = ScopeRestriction.from_wire(
            {"literals": ["a"], "clusterRole": {"roleNames": ["view"], "namespaces": ["*"]}}
        )

        # Act & Assert
        assert restriction.populated() == ["literals", "clusterRole"]
        assert restriction.variant() is None

    def test_empty_literal_list_counts_as_unset(self):
        restriction = ScopeRestriction.from_wire({"literals": []})
        assert restriction.populated() == []
        assert restriction.variant() is None
