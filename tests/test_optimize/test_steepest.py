import numpy as np
import pytest

from sdopt.optimize import (
    QUADRATIC,
    ROSENBROCK,
    RunParameters,
    Status,
    floor5,
    format5,
    iter_steepest_descent,
    magnitude,
    steepest_descent,
)


def test_quadratic_textbook_run_converges(make_params):
    params = make_params()
    res = steepest_descent("quadratic", params, history=True)

    first = res.records[0]
    assert first.iteration == 1
    assert first.formatted_value == "32.00000"
    assert " ".join(first.formatted_point) == "4.00000 4.00000"
    assert first.grad_norm is None

    assert res.status is Status.CONVERGED
    assert res.success
    assert res.nit < params.iterations
    assert res.message == f"Convergence reached after {res.nit} iterations."
    assert len(res.records) == res.nit
    assert res.grad_norm < params.tolerance

    values = [r.value for r in res.records]
    assert all(b < a for a, b in zip(values, values[1:]))


def test_quadratic_step_takes_extra_ulp(make_params):
    records = list(iter_steepest_descent(QUADRATIC, make_params(iterations=2)))
    expected = np.nextafter(4.0 - 0.1 * 8.0, -np.inf)
    assert records[1].point[0] == expected
    assert records[1].point[1] == expected
    assert records[1].formatted_grad_norm == "11.31370"


def test_rosenbrock_step_has_no_ulp_adjustment(make_params):
    params = make_params(point=(-1.2, 1.0), iterations=2, step_size=0.001)
    x0 = np.array([-1.2, 1.0])
    grad = ROSENBROCK.gradient(x0)
    records = list(iter_steepest_descent(ROSENBROCK, params))
    expected = floor5(x0) - 0.001 * floor5(grad)
    assert np.array_equal(records[1].point, expected)
    assert records[1].grad_norm == magnitude(grad)


def test_rosenbrock_first_value_is_truncated_closed_form(make_params):
    params = make_params(point=(-1.2, 1.0), iterations=5, step_size=0.001)
    res = steepest_descent("Rosenbrock", params, history=True)
    a, b = floor5(-1.2), floor5(1.0)
    closed = 100.0 * (b - a * a) ** 2 + (1.0 - a) ** 2
    assert res.records[0].value == closed
    assert res.records[0].formatted_value == format5(closed)


def test_small_iteration_cap_exhausts(make_params):
    params = make_params(point=(-1.2, 1.0), iterations=2, step_size=0.001)
    res = steepest_descent(ROSENBROCK, params, history=True)
    assert res.status is Status.EXHAUSTED
    assert not res.success
    assert res.nit == 2
    assert res.message == "Maximum iterations reached without satisfying the tolerance."
    assert [r.iteration for r in res.records] == [1, 2]


def test_single_iteration_cap_reports_initial_point_only(make_params):
    res = steepest_descent(QUADRATIC, make_params(iterations=1), history=True)
    assert res.status is Status.EXHAUSTED
    assert len(res.records) == 1
    assert res.grad_norm is None
    assert res.fun == 32.0


def test_rosenbrock_dimension_one_rejected_before_iterating(make_params):
    seen = []
    params = make_params(point=(1.0,))
    with pytest.raises(ValueError, match="dimensionality"):
        steepest_descent("rosenbrock", params, callback=seen.append)
    assert seen == []


def test_point_length_mismatch_rejected():
    with pytest.raises(ValueError, match="coordinates"):
        RunParameters(
            dimensionality=3,
            iterations=10,
            tolerance=1e-4,
            step_size=0.1,
            initial_point=np.array([1.0, 2.0]),
        )


@pytest.mark.parametrize(
    "kwargs",
    [
        {"dimensionality": 0, "initial_point": np.array([])},
        {"iterations": 0},
        {"tolerance": float("nan")},
        {"initial_point": np.array([1.0, np.inf])},
    ],
)
def test_invalid_parameters_rejected(kwargs):
    base = {
        "dimensionality": 2,
        "iterations": 10,
        "tolerance": 1e-4,
        "step_size": 0.1,
        "initial_point": np.array([1.0, 1.0]),
    }
    base.update(kwargs)
    with pytest.raises(ValueError):
        RunParameters(**base)


def test_out_of_bounds_start_rejected(make_params):
    with pytest.raises(ValueError, match="outside the bounds"):
        steepest_descent(QUADRATIC, make_params(point=(5.5, 0.0)))


def test_iterator_validates_lazily(make_params):
    gen = iter_steepest_descent(ROSENBROCK, make_params(point=(0.0,)))
    with pytest.raises(ValueError):
        next(gen)


def test_initial_point_not_mutated(make_params):
    start = np.array([4.0, 4.0])
    params = make_params(point=start)
    steepest_descent(QUADRATIC, params)
    assert np.array_equal(start, [4.0, 4.0])
    assert np.array_equal(params.initial_point, [4.0, 4.0])
    assert not params.initial_point.flags.writeable


def test_callback_sees_every_record(make_params):
    seen = []
    res = steepest_descent(QUADRATIC, make_params(), callback=seen.append)
    assert [r.iteration for r in seen] == list(range(1, res.nit + 1))
    assert res.records == []
    assert res.nfev == res.nit
    assert res.njev == res.nit - 1


def test_runs_are_deterministic(make_params):
    params = make_params(point=(-1.2, 1.0, 0.5), iterations=50, step_size=0.0005)
    res1 = steepest_descent(ROSENBROCK, params, history=True)
    res2 = steepest_descent(ROSENBROCK, params, history=True)
    assert np.array_equal(res1.x, res2.x)
    assert [r.formatted_value for r in res1.records] == [
        r.formatted_value for r in res2.records
    ]


def test_loop_may_leave_bounds(make_params):
    params = make_params(point=(4.0,), iterations=3, step_size=2.0)
    res = steepest_descent(QUADRATIC, params, history=True)
    assert abs(res.records[1].point[0]) > 5.0


def test_zero_tolerance_never_converges(make_params):
    params = make_params(point=(0.0, 0.0), iterations=4, tolerance=0.0)
    res = steepest_descent(QUADRATIC, params)
    assert res.status is Status.EXHAUSTED
    assert res.nit == 4
