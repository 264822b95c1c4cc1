"""Unit tests for notification header helpers."""

import pytest

from app.internal.header_util import (
    create_alert,
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
    create_failure_alert,
)


@pytest.mark.unit
class TestHeaderUtil:
    def test_create_alert_url_encodes_param(self):
        headers = create_alert("libraryApp", "hello", "a b&c")

        assert headers == {
            "X-libraryApp-alert": "hello",
            "X-libraryApp-params": "a+b%26c",
        }

    @pytest.mark.parametrize(
        ("factory", "action"),
        [
            (create_entity_creation_alert, "created"),
            (create_entity_update_alert, "updated"),
            (create_entity_deletion_alert, "deleted"),
        ],
    )
    def test_entity_alerts_with_translation(self, factory, action):
        headers = factory("libraryApp", True, "publisher", "5")

        assert headers["X-libraryApp-alert"] == f"libraryApp.publisher.{action}"
        assert headers["X-libraryApp-params"] == "5"

    def test_entity_alerts_without_translation(self):
        assert create_entity_creation_alert("app", False, "publisher", "5")[
            "X-app-alert"
        ] == "A new publisher is created with identifier 5"
        assert create_entity_update_alert("app", False, "publisher", "5")[
            "X-app-alert"
        ] == "A publisher is updated with identifier 5"
        assert create_entity_deletion_alert("app", False, "publisher", "5")[
            "X-app-alert"
        ] == "A publisher is deleted with identifier 5"

    def test_failure_alert(self):
        translated = create_failure_alert("app", True, "publisher", "idnull", "Invalid id")
        plain = create_failure_alert("app", False, "publisher", "idnull", "Invalid id")

        assert translated == {"X-app-error": "error.idnull", "X-app-params": "publisher"}
        assert plain["X-app-error"] == "Invalid id"
