from resumable.state import Complete, State, Yield


class TestStateHelpers:
    def test_yield_helpers(self):
        state: State[int, str] = Yield(3)

        assert state.is_yield()
        assert not state.is_complete()
        assert state.as_yield() == 3
        assert state.as_complete() is None
        assert state.value == 3

    def test_complete_helpers(self):
        state: State[int, str] = Complete("done")

        assert state.is_complete()
        assert not state.is_yield()
        assert state.as_complete() == "done"
        assert state.as_yield() is None
        assert state.value == "done"

    def test_variants_with_same_payload_differ(self):
        assert Yield(1) != Complete(1)
        assert Yield(1) == Yield(1)
        assert hash(Complete("x")) == hash(Complete("x"))
