"""Tests for transition graphs and the domain instantiations."""

import pytest

from lifecycle_store.core.exceptions import ConfigurationError, InvalidStatusError
from lifecycle_store.lifecycle import (
    APPOINTMENT_GRAPH,
    LOAN_GRAPH,
    TASK_GRAPH,
    AppointmentStatus,
    LoanStatus,
    TaskStatus,
    Transition,
    TransitionGraph,
)


class TestTransitionGraph:
    """Test graph construction and queries."""

    def test_graph_from_strings(self):
        graph = TransitionGraph(
            name="door",
            states=["open", "closed"],
            initial="closed",
            transitions=[Transition.of("closed", "open"), Transition.of("open", "closed")],
        )

        assert graph.states == ("open", "closed")
        assert graph.can_transition("closed", "open")
        assert graph.terminal_states == ()

    def test_initial_must_be_a_state(self):
        with pytest.raises(ConfigurationError, match="Initial state"):
            TransitionGraph(name="bad", states=["a", "b"], initial="c", transitions=[])

    def test_unknown_endpoint_rejected(self):
        with pytest.raises(ConfigurationError, match="endpoint 'z'"):
            TransitionGraph(name="bad", states=["a"], initial="a", transitions=[Transition.of("a", "z")])

    def test_self_loop_rejected(self):
        with pytest.raises(ConfigurationError, match="Self-loop"):
            TransitionGraph(name="bad", states=["a"], initial="a", transitions=[Transition.of("a", "a")])

    def test_duplicate_edge_rejected(self):
        with pytest.raises(ConfigurationError, match="Duplicate transition"):
            TransitionGraph(
                name="bad",
                states=["a", "b"],
                initial="a",
                transitions=[Transition.of("a", "b"), Transition.of("a", "b", stamp="x")],
            )

    def test_empty_states_rejected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            TransitionGraph(name="bad", states=[], initial="a", transitions=[])

        assert exc_info.value.details == {"config_key": "states"}

    def test_coerce(self):
        assert APPOINTMENT_GRAPH.coerce(AppointmentStatus.ACTIVE) == "active"
        assert APPOINTMENT_GRAPH.coerce("cancelled") == "cancelled"
        with pytest.raises(InvalidStatusError) as exc_info:
            APPOINTMENT_GRAPH.coerce("done")
        assert exc_info.value.details == {"status": "done", "graph": "appointment"}

    def test_contains(self):
        assert LoanStatus.LOANED in LOAN_GRAPH
        assert "done" not in LOAN_GRAPH

    def test_transition_is_immutable(self):
        transition = Transition.of("a", "b")

        with pytest.raises(Exception):
            transition.stamp = "changed"


class TestDomainGraphs:
    """Test the appointment, loan and task graphs."""

    def test_appointment_graph(self):
        assert APPOINTMENT_GRAPH.initial == AppointmentStatus.ACTIVE
        assert set(APPOINTMENT_GRAPH.targets_from(AppointmentStatus.ACTIVE)) == {"completed", "cancelled"}
        assert APPOINTMENT_GRAPH.terminal_states == ("completed", "cancelled")
        assert APPOINTMENT_GRAPH.get("active", "completed").stamp == "completed_at"
        assert APPOINTMENT_GRAPH.get("active", "cancelled").stamp == "cancelled_at"
        assert APPOINTMENT_GRAPH.get("completed", "cancelled") is None

    def test_loan_graph_is_cyclic(self):
        loan = LOAN_GRAPH.get(LoanStatus.AVAILABLE, LoanStatus.LOANED)
        back = LOAN_GRAPH.get(LoanStatus.LOANED, LoanStatus.AVAILABLE)

        assert loan.stamp == "loaned_at"
        assert loan.clears == ("returned_at",)
        assert back.stamp == "returned_at"
        assert back.clears == ()
        assert LOAN_GRAPH.terminal_states == ()

    def test_task_graph(self):
        assert TASK_GRAPH.initial == TaskStatus.PENDING
        assert TASK_GRAPH.is_terminal(TaskStatus.DONE)
        assert not TASK_GRAPH.is_terminal(TaskStatus.PENDING)
        assert len(TASK_GRAPH.transitions) == 1

    @pytest.mark.parametrize("graph", [APPOINTMENT_GRAPH, TASK_GRAPH])
    def test_monotone_graphs_never_reenter_initial(self, graph: TransitionGraph):
        assert all(t.target != graph.initial for t in graph.transitions)
