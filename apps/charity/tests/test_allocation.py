from decimal import Decimal
from types import SimpleNamespace

import pytest
from apps.charity.services import allocate, floor_amount, plan_allocations, InvalidAmountError


def _org(pct):
    return SimpleNamespace(allocation_percentage=Decimal(pct))


class TestAllocate:

    def test_exact_split(self):
        plan = plan_allocations(100, [_org('60'), _org('40')])

        assert [a.allocated_amount for a in plan.allocations] == [60, 40]
        assert plan.total_allocated == 100
        assert plan.remainder == 0

    def test_split_with_remainder(self):
        plan = plan_allocations(101, [_org('60'), _org('40')])

        assert [a.allocated_amount for a in plan.allocations] == [60, 40]
        assert plan.remainder == 1

    def test_fractional_percentages_floor(self):
        assert allocate(7, Decimal('33.33')) == 2
        assert allocate(1, Decimal('40.00')) == 0

    def test_seed_percentages(self):
        plan = plan_allocations(99, [_org('40'), _org('30'), _org('20'), _org('10')])
        assert [a.allocated_amount for a in plan.allocations] == [39, 29, 19, 9]
        assert plan.remainder == 3


class TestFloorAmount:

    @pytest.mark.parametrize('value,expected', [
        (5, 5),
        (5.9, 5),
        ('12.7', 12),
        ('0', 0),
        (Decimal('3.999'), 3),
    ])
    def test_floors(self, value, expected):
        assert floor_amount(value) == expected

    @pytest.mark.parametrize('value', [-1, '-0.5', 'ten', '', None, True, 'NaN', 'Infinity', [1]])
    def test_rejects(self, value):
        with pytest.raises(InvalidAmountError):
            floor_amount(value)
