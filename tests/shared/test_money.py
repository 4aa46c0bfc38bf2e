from decimal import Decimal

from flowershop.shared.money import line_total, sum_amounts, to_amount


def test_line_total_is_exact():
    assert line_total(19.99, 3) == Decimal("59.97")


def test_sum_amounts_rounds_to_cents():
    assert sum_amounts([0.1, 0.2]) == 0.3
    assert sum_amounts([line_total(19.99, 3), line_total(5.5, 2)]) == 70.97


def test_to_amount_rounds_half_up():
    assert to_amount(Decimal("1.005")) == 1.01
