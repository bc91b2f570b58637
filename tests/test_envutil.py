"""Tests for v23_tooling.envutil."""

import os

from v23_tooling.envutil import Snapshot


class TestSnapshot:
    def test_copies_base(self) -> None:
        base = {"A": "1"}
        env = Snapshot(base)
        env.set("A", "2")
        assert base == {"A": "1"}
        assert env.get("A") == "2"

    def test_get_missing_returns_default(self) -> None:
        env = Snapshot()
        assert env.get("NOPE") == ""
        assert env.get("NOPE", "x") == "x"
        assert "NOPE" not in env

    def test_get_tokens_unset_is_empty(self) -> None:
        assert Snapshot().get_tokens("GOPATH", ":") == []

    def test_get_tokens_empty_value_is_empty(self) -> None:
        assert Snapshot({"GOPATH": ""}).get_tokens("GOPATH", ":") == []

    def test_token_round_trip(self) -> None:
        env = Snapshot()
        tokens = ["/a", "/b/c", "/d"]
        env.set_tokens("GOPATH", tokens, ":")
        assert env.get("GOPATH") == "/a:/b/c:/d"
        assert env.get_tokens("GOPATH", ":") == tokens

    def test_space_separated_tokens(self) -> None:
        env = Snapshot({"CGO_CFLAGS": "-O2 -g"})
        assert env.get_tokens("CGO_CFLAGS", " ") == ["-O2", "-g"]

    def test_delta_reports_changed_and_added(self) -> None:
        env = Snapshot({"A": "1", "B": "2"})
        env.set("A", "1")
        env.set("B", "3")
        env.set("C", "4")
        assert env.delta() == {"B": "3", "C": "4"}

    def test_from_os_does_not_write_back(self, monkeypatch) -> None:
        monkeypatch.setenv("V23_SNAPSHOT_TEST", "orig")
        env = Snapshot.from_os()
        env.set("V23_SNAPSHOT_TEST", "changed")
        assert os.environ["V23_SNAPSHOT_TEST"] == "orig"
        assert env.to_dict()["V23_SNAPSHOT_TEST"] == "changed"
