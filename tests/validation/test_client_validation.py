from oauth_validation.field import ErrorType, new_path
from oauth_validation.models.clients import OAuthClient, ScopeRestriction
from oauth_validation.models.meta import ObjectMeta
from oauth_validation.validation.objects import (
    validate_client,
    validate_client_update,
    validate_scope_restriction,
)


def restriction_errors(restriction: ScopeRestriction):
    return validate_scope_restriction(restriction, new_path("scopeRestrictions").index(0))


class TestValidateScopeRestriction:
    def test_literals(self):
        assert restriction_errors(ScopeRestriction.exact("user:info")) == []

    def test_cluster_role(self):
        assert restriction_errors(ScopeRestriction.for_cluster_role(["view"], ["*"])) == []

    def test_both_variants_yield_single_error(self):
        # Arrange
        restriction = ScopeRestriction.from_wire(
            {"literals": [""], "clusterRole": {"roleNames": [], "namespaces": []}}
        )

        # Act
        errs = restriction_errors(restriction)

        # Assert
        assert len(errs) == 1
        assert errs[0].type is ErrorType.INVALID
        assert errs[0].field == "scopeRestrictions[0]"
        assert errs[0].detail == "exactly one of literals, clusterRole is required"

    def test_no_variant_yields_single_error(self):
        errs = restriction_errors(ScopeRestriction())
        assert [err.detail for err in errs] == ["exactly one of literals, clusterRole is required"]

    def test_empty_literal(self):
        # Act
        errs = restriction_errors(ScopeRestriction.exact("user:info", ""))

        # Assert
        assert [(err.field, err.detail) for err in errs] == [
            ("scopeRestrictions[0].literals[1]", "may not be empty")
        ]

    def test_cluster_role_without_names_or_namespaces(self):
        # Act
        errs = restriction_errors(ScopeRestriction.for_cluster_role([], []))

        # Assert
        assert [(err.type, err.field, err.detail) for err in errs] == [
            (ErrorType.REQUIRED, "scopeRestrictions[0].clusterRole.roleNames", "won't match anything"),
            (ErrorType.REQUIRED, "scopeRestrictions[0].clusterRole.namespaces", "won't match anything"),
        ]


class TestValidateClient:
    def test_valid_client(self, client):
        assert validate_client(client) == []

    def test_client_name_must_be_dns_subdomain(self, client):
        # Arrange
        bad = client.model_copy(update={"metadata": ObjectMeta(name="My_Client")})

        # Act
        errs = validate_client(bad)

        # Assert
        assert [err.field for err in errs] == ["metadata.name"]

    def test_each_redirect_uri_checked(self, client):
        # Arrange
        bad = client.model_copy(
            update={"redirect_uris": ["https://ok", "https://x/./y", "https://x#f"]}
        )

        # Act
        errs = validate_client(bad)

        # Assert
        assert [(err.field, err.detail) for err in errs] == [
            ("redirectURIs[1]", "may not contain a path segment of ."),
            ("redirectURIs[2]", "may not contain a fragment"),
        ]

    def test_each_scope_restriction_checked(self):
        # Arrange
        client = OAuthClient.from_wire(
            {
                "metadata": {"name": "myclient"},
                "scopeRestrictions": [
                    {"literals": ["user:info"]},
                    {},
                    {"clusterRole": {"roleNames": ["view"], "namespaces": []}},
                ],
            }
        )

        # Act
        errs = validate_client(client)

        # Assert
        assert [err.field for err in errs] == [
            "scopeRestrictions[1]",
            "scopeRestrictions[2].clusterRole.namespaces",
        ]


class TestValidateClientUpdate:
    def test_redirect_uris_may_change(self, client):
        new = client.model_copy(update={"redirect_uris": ["https://other/cb"]})
        assert validate_client_update(new, client) == []

    def test_rename_rejected(self, client):
        new = client.model_copy(update={"metadata": ObjectMeta(name="renamed")})
        errs = validate_client_update(new, client)
        assert [(err.field, err.detail) for err in errs] == [("metadata.name", "field is immutable")]

    def test_new_state_validated_before_metadata_diff(self, client):
        # Arrange
        new = client.model_copy(
            update={"metadata": ObjectMeta(name="renamed"), "redirect_uris": ["https://x#f"]}
        )

        # Act
        errs = validate_client_update(new, client)

        # Assert
        assert [err.field for err in errs] == ["redirectURIs[0]", "metadata.name"]
