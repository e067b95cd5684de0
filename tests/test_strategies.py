"""Tests for the priority-list combinator."""


class TestFirstSuccess:
    """Tests for first_success()."""

    def test_first_hit_wins(self):
        """Test the earliest strategy with a value is chosen."""
        from feedscan.extractors.strategies import first_success

        strategies = [
            ("missing", lambda x: None),
            ("upper", lambda x: x.upper()),
            ("lower", lambda x: x.lower()),
        ]
        value, provenance = first_success("name", strategies, "Jane")

        assert value == "JANE"
        assert provenance.field == "name"
        assert provenance.strategy == "upper"
        assert provenance.rank == 2

    def test_empty_values_are_misses(self):
        """Test empty strings and lists fall through to the next strategy."""
        from feedscan.extractors.strategies import first_success

        strategies = [("blank", lambda: ""), ("empty", lambda: []), ("hit", lambda: "ok")]
        assert first_success("f", strategies)[0] == "ok"

    def test_raising_strategy_is_skipped(self):
        """Test a strategy that raises does not stop the rest."""
        from feedscan.extractors.strategies import first_success

        def broken():
            raise RuntimeError("Element is not attached to the DOM")

        value, provenance = first_success("f", [("broken", broken), ("ok", lambda: 42)])

        assert value == 42
        assert provenance.rank == 2

    def test_all_miss(self):
        """Test (None, None) when nothing produces a value."""
        from feedscan.extractors.strategies import first_success

        assert first_success("f", [("a", lambda: None)]) == (None, None)
        assert first_success("f", []) == (None, None)

    def test_start_rank(self):
        """Test ranks can continue from an earlier list."""
        from feedscan.extractors.strategies import first_success

        _, provenance = first_success("f", [("fallback", lambda: "v")], start_rank=4)
        assert provenance.rank == 4
