import pytest

from camptools.coordinates import Coordinates
from camptools.montecarlo import MonteCarlo
from camptools.uniform import Uniform


def test_downhill_move_is_accepted():
    start = Coordinates("sum_squares", 3.0, 4.0)
    mc = MonteCarlo(start, 0)
    proposal = Coordinates("sum_squares", 1.0, 1.0)
    assert mc.boltzmann(proposal) is True
    assert mc.last_accepted_z == proposal.z
    assert mc.last_accepted_coordinates == proposal


def test_stored_point_is_a_copy_of_the_start():
    start = Coordinates("sum_squares", 3.0, 4.0)
    mc = MonteCarlo(start, 0)
    start.x = 10.0
    assert mc.last_accepted_coordinates.x == 3.0
    assert mc.last_accepted_z == 25.0


def test_uphill_move_at_zero_temperature_is_rejected_and_reset():
    mc = MonteCarlo(Coordinates("sum_squares", 1.0, 1.0), 0)
    proposal = Coordinates("sum_squares", 5.0, 5.0)
    assert mc.boltzmann(proposal) is False
    assert proposal.x == 1.0
    assert proposal.y == 1.0
    assert proposal.z == mc.last_accepted_z


def test_equal_height_at_zero_temperature_is_rejected():
    mc = MonteCarlo(Coordinates("sum_squares", 1.0, 2.0), 0)
    proposal = Coordinates("sum_squares", 2.0, 1.0)
    assert mc.boltzmann(proposal) is False
    assert (proposal.x, proposal.y) == (1.0, 2.0)


def test_uphill_move_at_huge_temperature_is_accepted():
    mc = MonteCarlo(Coordinates("sum_squares", 1.0, 1.0), 1e300)
    proposal = Coordinates("sum_squares", 5.0, 5.0)
    assert mc.boltzmann(proposal) is True
    assert mc.last_accepted_coordinates == proposal
    assert proposal.x == 5.0


def test_accepted_point_is_independent_of_proposal():
    mc = MonteCarlo(Coordinates("sum_squares", 3.0, 3.0), 0)
    proposal = Coordinates("sum_squares", 1.0, 1.0)
    assert mc.boltzmann(proposal)
    proposal.modify_x(100.0)
    assert mc.last_accepted_coordinates.x == 1.0


def test_temperature_can_be_changed():
    mc = MonteCarlo(Coordinates("ackley", 0.0, 0.0), 0.5)
    assert mc.temperature == 0.5
    mc.temperature = 2.0
    assert mc.temperature == 2.0


@pytest.mark.parametrize("temperature", [0.5, 5.0, 50.0])
def test_decisions_are_reproducible_after_reseeding(temperature):
    def decisions():
        Uniform().set_seed(42)
        mc = MonteCarlo(Coordinates("sum_squares", 0.0, 0.0), temperature)
        results = []
        proposed_z = []
        for step in range(1, 30):
            proposal = Coordinates("sum_squares", step * 0.1, 0.0)
            proposed_z.append(proposal.z)
            results.append(mc.boltzmann(proposal))
        return results, proposed_z, mc.last_accepted_z

    first = decisions()
    second = decisions()
    assert first == second

    results, proposed_z, last_z = first
    assert len(results) == 29
    accepted_z = [z for z, ok in zip(proposed_z, results) if ok]
    expected_last = accepted_z[-1] if accepted_z else 0.0
    assert last_z == expected_last


def test_rejection_leaves_proposal_matching_stored_point():
    Uniform().set_seed(3)
    mc = MonteCarlo(Coordinates("rastrigin", 4.0, 5.0), 1.0)
    for step in range(20):
        proposal = Coordinates("rastrigin", 4.0 + step * 0.3, 5.0)
        accepted = mc.boltzmann(proposal)
        assert proposal == mc.last_accepted_coordinates
        if not accepted:
            assert proposal.z == mc.last_accepted_z