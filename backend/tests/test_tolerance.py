from tripsplit.services.tolerance import EPSILON, is_creditor, is_debtor, is_negligible


def test_epsilon():
    assert EPSILON == 0.01


def test_classification():
    assert is_debtor(-0.02) and not is_debtor(-0.01)
    assert is_creditor(0.02) and not is_creditor(0.01)
    assert is_negligible(0.009) and is_negligible(-0.009)
    assert not is_negligible(0.01)
