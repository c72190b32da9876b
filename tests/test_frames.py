from engine.frames import (
    CATEGORY_COLUMNS,
    PROJECTION_COLUMNS,
    category_totals_frame,
    projection_to_frame,
)
from engine.projection import calculate_projection


def test_projection_to_frame(household):
    proj = calculate_projection(1000, "2026-03", household, 6)
    df = projection_to_frame(proj)

    assert list(df.columns) == PROJECTION_COLUMNS
    assert df["month"].tolist() == [m.month for m in proj]
    assert df["balance"].tolist() == [m.balance for m in proj]
    assert (df["net"] == df["income"] - df["expense"]).all()
    assert df.loc[df["month"] == "2026-05", "n_transactions"].item() == 4


def test_empty_projection_frames_keep_columns():
    assert list(projection_to_frame([]).columns) == PROJECTION_COLUMNS
    assert list(category_totals_frame([]).columns) == CATEGORY_COLUMNS
    assert projection_to_frame([]).empty


def test_category_totals_frame_is_long_format(household):
    proj = calculate_projection(0, "2026-04", household, 2)
    df = category_totals_frame(proj)

    april = df[df["month"] == "2026-04"].set_index("category_id")["total"].to_dict()
    assert april == {"cat-salary": 2500.0, "cat-rent": 900.0, "cat-transport": 300.0, "cat-dividend": 800.0}
    assert df.groupby("month")["total"].sum().to_dict() == {
        m.month: m.income + m.expense for m in proj
    }
