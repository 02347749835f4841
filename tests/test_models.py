"""Tests for resolution outcome models."""

from __future__ import annotations

from pathlib import Path

import pytest

from workspace_sandbox.models.resolution import PathResolution, Rejection, RejectionKind


class TestRejectionKind:
    @pytest.mark.parametrize(
        "kind",
        [kind for kind in RejectionKind if kind is not RejectionKind.ROOT_RESOLUTION],
    )
    def test_caller_recoverable(self, kind: RejectionKind):
        assert kind.recoverable

    def test_root_failure_not_recoverable(self):
        assert not RejectionKind.ROOT_RESOLUTION.recoverable

    def test_string_values(self):
        assert RejectionKind("access_denied") is RejectionKind.ACCESS_DENIED


class TestRejection:
    def test_message_without_suggestion(self):
        rejection = Rejection(kind=RejectionKind.INVALID_PATH, reason="Invalid path: no filename")
        assert rejection.message == "Invalid path: no filename"

    def test_message_with_suggestion(self):
        rejection = Rejection(
            kind=RejectionKind.ACCESS_DENIED,
            reason="Access denied.",
            suggestion="Use host_read.",
        )
        assert rejection.message == "Access denied. Use host_read."

    def test_serializes_kind_value(self):
        rejection = Rejection(kind=RejectionKind.TRAVERSAL_DENIED, reason="no", user_path="..")
        assert rejection.model_dump(mode="json")["kind"] == "traversal_denied"


class TestPathResolution:
    def test_ok_when_path_set(self, tmp_path: Path):
        assert PathResolution(user_path="x", path=tmp_path).ok

    def test_not_ok_when_rejected(self):
        resolution = PathResolution(
            user_path="..",
            rejection=Rejection(kind=RejectionKind.TRAVERSAL_DENIED, reason="no"),
        )
        assert not resolution.ok
