import pytest

from spritesheet_anim.easing import Easing, EasingVariety

V = EasingVariety

CASES = {
    ("linear", None): [
        (-1000.0, 0.0), (0.0, 0.0), (0.15, 0.15), (0.38, 0.38),
        (0.72, 0.72), (0.99, 0.99), (1.0, 1.0), (123.0, 1.0),
    ],
    ("in", V.QUADRATIC): [
        (-123.5, 0.0), (0.0, 0.0), (0.12, 0.0144), (0.31, 0.0961),
        (0.5, 0.25), (0.78, 0.6084), (1.0, 1.0), (9999.0, 1.0),
    ],
    ("in", V.CUBIC): [
        (-5670.0, 0.0), (0.0, 0.0), (0.12, 0.00172), (0.45, 0.09112),
        (0.88, 0.68147), (0.99, 0.97029), (1.0, 1.0), (1.2, 1.0),
    ],
    ("in", V.QUARTIC): [
        (-99999.0, 0.0), (0.0, 0.0), (0.11, 0.00014641), (0.36, 0.01679615),
        (0.52, 0.07311616), (0.91, 0.68574961), (1.87, 1.0),
    ],
    ("in", V.QUINTIC): [
        (-99999.0, 0.0), (0.0, 0.0), (0.16, 0.00010), (0.29, 0.00205),
        (0.5, 0.03125), (0.81, 0.34867), (1.0, 1.0), (1.87, 1.0),
    ],
    ("in", V.EXPONENTIAL): [
        (-99999.0, 0.0), (0.0, 0.0), (0.05, 0.001381), (0.37, 0.012691),
        (0.62, 0.071793), (0.88, 0.435275), (0.93, 0.615572), (1.0, 1.0),
        (1.87, 1.0),
    ],
    ("in", V.CIRCULAR): [
        (-99999.0, 0.0), (0.0, 0.0), (0.1, 0.005012), (0.15, 0.011314),
        (0.48, 0.122731), (0.79, 0.386893), (0.98, 0.801002), (1.0, 1.0),
        (1.87, 1.0),
    ],
    ("in", V.SIN): [
        (-99999.0, 0.0), (0.0, 0.0), (0.04, 0.001973), (0.37, 0.164192),
        (0.52, 0.315452), (0.62, 0.437916), (0.97, 0.952893), (1.0, 1.0),
        (1.87, 1.0),
    ],
    ("out", V.QUADRATIC): [
        (-123.5, 0.0), (0.0, 0.0), (0.06, 0.1164), (0.36, 0.5904),
        (0.49, 0.7399), (0.68, 0.8976), (0.8, 0.96), (0.94, 0.9964),
        (1.0, 1.0), (9999.0, 1.0),
    ],
    ("out", V.CUBIC): [
        (-5670.0, 0.0), (0.0, 0.0), (0.12, 0.31853), (0.27, 0.61098),
        (0.48, 0.85939), (0.57, 0.92049), (0.87, 0.99780), (0.98, 0.99999),
        (1.0, 1.0), (1.2, 1.0),
    ],
    ("out", V.QUARTIC): [
        (-99999.0, 0.0), (0.0, 0.0), (0.07, 0.25195), (0.19, 0.56953),
        (0.31, 0.77333), (0.52, 0.94692), (0.68, 0.98951), (0.87, 0.99971),
        (0.9, 0.99990), (1.0, 1.0), (1.87, 1.0),
    ],
    ("out", V.QUINTIC): [
        (-99999.0, 0.0), (0.0, 0.0), (0.19, 0.65132), (0.35, 0.88397),
        (0.52, 0.97452), (0.71, 0.99795), (0.88, 0.99998), (0.98, 1.00000),
        (1.0, 1.0), (1.87, 1.0),
    ],
    ("out", V.EXPONENTIAL): [
        (-99999.0, 0.0), (0.0, 0.0), (0.02, 0.12945), (0.15, 0.64645),
        (0.33, 0.89847), (0.54, 0.97632), (0.73, 0.99365), (0.95, 0.99862),
        (1.0, 1.0), (1.87, 1.0),
    ],
    ("out", V.CIRCULAR): [
        (-99999.0, 0.0), (0.0, 0.0), (0.06, 0.34117), (0.16, 0.54259),
        (0.39, 0.79240), (0.53, 0.88267), (0.74, 0.96561), (0.92, 0.99679),
        (1.0, 1.0), (1.87, 1.0),
    ],
    ("out", V.SIN): [
        (-99999.0, 0.0), (0.0, 0.0), (0.02, 0.03141), (0.27, 0.41151),
        (0.49, 0.69591), (0.62, 0.82708), (0.83, 0.96456), (0.93, 0.99396),
        (1.0, 1.0), (1.87, 1.0),
    ],
    ("in_out", V.QUADRATIC): [
        (-123.5, 0.0), (0.0, 0.0), (0.05, 0.00500), (0.17, 0.05780),
        (0.31, 0.19220), (0.46, 0.42320), (0.62, 0.71120), (0.81, 0.92780),
        (0.97, 0.99820), (1.0, 1.0), (9999.0, 1.0),
    ],
    ("in_out", V.CUBIC): [
        (-5670.0, 0.0), (0.0, 0.0), (0.01, 0.00000), (0.07, 0.00137),
        (0.26, 0.07030), (0.47, 0.41529), (0.59, 0.72432), (0.71, 0.90244),
        (0.81, 0.97256), (0.99, 1.00000), (1.0, 1.0), (1.2, 1.0),
    ],
    ("in_out", V.QUARTIC): [
        (-99999.0, 0.0), (0.0, 0.0), (0.02, 0.00000), (0.21, 0.01556),
        (0.32, 0.08389), (0.49, 0.46118), (0.59, 0.77394), (0.78, 0.98126),
        (0.91, 0.99948), (1.0, 1.0), (1.87, 1.0),
    ],
    ("in_out", V.QUINTIC): [
        (-99999.0, 0.0), (0.0, 0.0), (0.02, 0.00000), (0.07, 0.00003),
        (0.21, 0.00653), (0.48, 0.40769), (0.59, 0.81463), (0.61, 0.85564),
        (0.79, 0.99347), (0.99, 1.00000), (1.0, 1.0), (1.87, 1.0),
    ],
    ("in_out", V.EXPONENTIAL): [
        (-99999.0, 0.0), (0.0, 0.0), (0.07, 0.00129), (0.19, 0.00680),
        (0.26, 0.01795), (0.43, 0.18946), (0.62, 0.90527), (0.88, 0.99742),
        (0.96, 0.99915), (1.0, 1.0), (1.87, 1.0),
    ],
    ("in_out", V.CIRCULAR): [
        (-99999.0, 0.0), (0.0, 0.0), (0.01, 0.00010), (0.22, 0.05100),
        (0.35, 0.14293), (0.52, 0.64000), (0.62, 0.82496), (0.89, 0.98775),
        (0.92, 0.99356), (1.0, 1.0), (1.87, 1.0),
    ],
    ("in_out", V.SIN): [
        (-99999.0, 0.0), (0.0, 0.0), (0.05, 0.00616), (0.21, 0.10492),
        (0.43, 0.39093), (0.54, 0.56267), (0.69, 0.78104), (0.81, 0.91354),
        (0.99, 0.99975), (1.0, 1.0), (1.87, 1.0),
    ],
}

PARAMS = [
    pytest.param(kind, variety, x, expected, id=f"{kind}-{variety.name if variety else ''}-{x}")
    for (kind, variety), cases in CASES.items()
    for x, expected in cases
]


@pytest.mark.parametrize("kind,variety,x,expected", PARAMS)
def test_easing_values(kind, variety, x, expected):
    assert Easing(kind, variety).get(x) == pytest.approx(expected, abs=1e-5)


def test_default_is_linear():
    easing = Easing()
    assert easing.kind == "linear"
    assert easing.get(0.42) == pytest.approx(0.42)


@pytest.mark.parametrize("kind", ["in", "out", "in_out"])
@pytest.mark.parametrize("variety", list(EasingVariety))
def test_results_stay_in_unit_range_and_fix_endpoints(kind, variety):
    easing = Easing(kind, variety)
    assert easing.get(0.0) == pytest.approx(0.0, abs=1e-9)
    assert easing.get(1.0) == pytest.approx(1.0, abs=1e-9)
    for step in range(101):
        value = easing.get(step / 100)
        assert -1e-9 <= value <= 1.0 + 1e-9


def test_linear_rejects_variety():
    with pytest.raises(ValueError):
        Easing("linear", EasingVariety.CUBIC)


def test_non_linear_needs_variety():
    with pytest.raises(ValueError):
        Easing("in")


def test_unknown_kind_rejected():
    with pytest.raises(ValueError):
        Easing("sideways", EasingVariety.CUBIC)


def test_easings_are_hashable_values():
    assert Easing("out", EasingVariety.SIN) == Easing("out", EasingVariety.SIN)
    assert len({Easing("out", EasingVariety.SIN), Easing("out", EasingVariety.SIN)}) == 1