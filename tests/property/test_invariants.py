"""
Property-based tests for the capacity invariants using Hypothesis.
"""

import math

from hypothesis import assume, given
from hypothesis import strategies as st

from carriage.core.capacity import can_carry, effective_limits
from carriage.core.fleet import train
from carriage.models import Carrier, CarrierCategory, Dimensions

# ============================================================================
# Strategies
# ============================================================================

positive = st.floats(min_value=0.01, max_value=1000, allow_nan=False, allow_infinity=False)
dimensions = st.builds(Dimensions, positive, positive, positive)
axes = st.sampled_from(['length', 'width', 'height'])


@st.composite
def carriers(draw, category=None, compartments=None):
    if category is None:
        category = draw(st.sampled_from(list(CarrierCategory)))
    n = 1
    if category is CarrierCategory.COMPARTMENTED:
        n = compartments or draw(st.integers(min_value=1, max_value=8))
    return Carrier(
        name=draw(st.text(min_size=1, max_size=10).filter(str.strip)),
        category=category,
        weight=draw(positive),
        dimensions=draw(dimensions),
        max_weight=draw(positive),
        max_dimensions=draw(dimensions),
        compartments=n,
        compartment_axis=draw(axes),
    )


# ============================================================================
# Weight
# ============================================================================


@given(carriers(), carriers())
def test_overweight_cargo_is_rejected(carrier, cargo):
    assume(carrier.category is not CarrierCategory.UNBOUNDED)
    assume(cargo.weight > carrier.max_weight)
    assert not can_carry(carrier, cargo)


# ============================================================================
# Dimensions
# ============================================================================


@given(
    st.sampled_from([CarrierCategory.STANDARD, CarrierCategory.HULL,
                     CarrierCategory.COMPARTMENTED]).flatmap(carriers),
    carriers(),
    axes,
)
def test_oversized_cargo_is_rejected(carrier, cargo, axis):
    assume(getattr(cargo.dimensions, axis) > getattr(carrier.max_dimensions, axis))
    assert not can_carry(carrier, cargo)


@given(carriers(category=CarrierCategory.STANDARD), carriers())
def test_standard_matches_definition(carrier, cargo):
    expected = (cargo.weight <= carrier.max_weight and
                carrier.max_dimensions.fits(cargo.dimensions))
    assert can_carry(carrier, cargo) == expected


# ============================================================================
# Fixed categories
# ============================================================================


@given(carriers(category=CarrierCategory.NO_STORAGE), carriers())
def test_no_storage_is_always_false(carrier, cargo):
    assert can_carry(carrier, cargo) is False


@given(carriers(category=CarrierCategory.UNBOUNDED), carriers())
def test_unbounded_is_always_true(carrier, cargo):
    assert can_carry(carrier, cargo) is True


# ============================================================================
# Compartments
# ============================================================================


@given(carriers(category=CarrierCategory.COMPARTMENTED), carriers())
def test_compartment_capacity_is_base_divided_by_n(carrier, cargo):
    n = carrier.compartments
    base = Carrier(
        name=carrier.name,
        category=CarrierCategory.STANDARD,
        weight=carrier.weight,
        dimensions=carrier.dimensions,
        max_weight=carrier.max_weight / n,
        max_dimensions=carrier.max_dimensions.divided(n, carrier.compartment_axis),
    )
    assert can_carry(carrier, cargo) == can_carry(base, cargo)


@given(carriers(category=CarrierCategory.COMPARTMENTED), carriers())
def test_compartments_never_add_capacity(carrier, cargo):
    whole = Carrier(
        name=carrier.name,
        category=CarrierCategory.STANDARD,
        weight=carrier.weight,
        dimensions=carrier.dimensions,
        max_weight=carrier.max_weight,
        max_dimensions=carrier.max_dimensions,
    )
    if can_carry(carrier, cargo):
        assert can_carry(whole, cargo)


# ============================================================================
# Coupled units (trailers, wagons)
# ============================================================================


@given(positive, dimensions, st.integers(min_value=1, max_value=20))
def test_train_limits_are_per_wagon(unit_weight, unit_dimensions, wagons):
    t = train("Freight", 500, Dimensions(300, 3, 4.5), unit_weight, unit_dimensions,
              wagons=wagons)
    weight, space = effective_limits(t)
    assert math.isclose(weight, unit_weight, rel_tol=1e-9)
    for got, expected in zip(space.as_tuple(), unit_dimensions.as_tuple()):
        assert math.isclose(got, expected, rel_tol=1e-9)
