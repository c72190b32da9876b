import pytest

from core.schema import DEFAULT_CATEGORIES, Direction, Recurrence
from engine.projection import calculate_projection
from kpi import compute_projection_kpis, summarize_categories


def test_kpis_for_healthy_budget(household):
    proj = calculate_projection(1000, "2026-03", household, 12)
    k = compute_projection_kpis(proj)

    assert k.start_month == "2026-03"
    assert k.end_month == "2027-02"
    assert k.current_balance == 2300
    assert k.target_balance == proj[-1].balance
    assert k.min_balance == 2300
    assert k.min_balance_month == "2026-03"
    assert not k.is_at_risk
    assert k.first_negative_month is None
    assert k.flags == []
    assert k.net_flow == pytest.approx(k.target_balance - 1000)


def test_kpis_flag_negative_balance(make_txn):
    txns = [
        make_txn(500, Direction.EXPENSE, Recurrence.MONTHLY, start_month="2026-01"),
        make_txn(1200, Direction.INCOME, month="2026-02"),
    ]
    proj = calculate_projection(0, "2026-01", txns, 4)
    k = compute_projection_kpis(proj)

    assert [m.balance for m in proj] == [-500, 200, -300, -800]
    assert k.is_at_risk
    assert k.min_balance == -800
    assert k.min_balance_month == "2026-04"
    assert k.first_negative_month == "2026-01"
    assert k.total_income == 1200
    assert k.total_expense == 2000
    assert any(f.startswith("NEGATIVE BALANCE from 2026-01") for f in k.flags)
    assert any(f.startswith("SPENDING EXCEEDS INCOME") for f in k.flags)


def test_kpis_to_dataframe(household):
    k = compute_projection_kpis(calculate_projection(1000, "2026-03", household, 12))
    df = k.to_dataframe()
    assert list(df.columns) == ["Metric", "Value"]
    assert "Lowest Balance" in df["Metric"].tolist()
    assert "FLAGS" not in df["Metric"].tolist()


def test_kpis_reject_empty_projection():
    with pytest.raises(ValueError):
        compute_projection_kpis([])


def test_summarize_categories_with_catalog(household):
    proj = calculate_projection(0, "2026-03", household, 12)
    df = summarize_categories(proj, DEFAULT_CATEGORIES)

    assert df["total"].is_monotonic_decreasing
    by_id = df.set_index("category_id")
    assert by_id.loc["cat-salary", "total"] == 2500 * 12
    assert by_id.loc["cat-rent", "total"] == 900 * 12 + 1200
    assert by_id.loc["cat-salary", "monthly_mean"] == 2500
    assert by_id.loc["cat-rent", "label"] == "Rent"
    assert by_id.loc["cat-rent", "direction"] == "expense"
    assert df["share"].sum() == pytest.approx(1.0)
    # every catalog entry is listed, even with no flow
    assert set(c.id for c in DEFAULT_CATEGORIES) <= set(df["category_id"])


def test_summarize_categories_without_catalog(make_txn):
    proj = calculate_projection(0, "2026-01", [make_txn(10, category_id="misc", month="2026-01")], 2)
    df = summarize_categories(proj)
    assert df["category_id"].tolist() == ["misc"]
    assert df.loc[0, "label"] == "misc"
    assert df.loc[0, "monthly_mean"] == 5


def test_summarize_categories_empty():
    assert summarize_categories([]).empty
