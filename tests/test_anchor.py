from __future__ import annotations

import pytest

from domain_scoring.valuation import ComparableSale, anchor_with_comps, load_comparable_sales
from domain_scoring.valuation.anchor import weighted_median


def _comps(price: float) -> list[ComparableSale]:
    return [
        ComparableSale("cloudpay.com", price, sale_date="2025-06-01", venue="end-user"),
        ComparableSale("cloudbase.com", price, sale_date="2025-03-15"),
        ComparableSale("bankcloud.com", price, sale_date="2024-11-02"),
    ]


def test_anchors_toward_comp_median(base_valuation, fixed_now):
    result = anchor_with_comps("cloudbank.com", base_valuation, _comps(10_000), now=fixed_now)
    assert result.comp_anchored
    assert result.comp_count == 3
    assert result.comp_median == 10_000
    assert result.anchor_adjustment == 2.6
    assert (result.value_min, result.value_max) == (2_600, 7_800)
    assert result.band == "$2,600 – $7,800"
    assert result.score == base_valuation.score


def test_adjustment_is_clamped(base_valuation, fixed_now):
    result = anchor_with_comps("cloudbank.com", base_valuation, _comps(1_000_000), now=fixed_now)
    assert result.anchor_adjustment == 3.0
    assert (result.value_min, result.value_max) == (3_000, 9_000)

    low = anchor_with_comps("cloudbank.com", base_valuation, _comps(1), now=fixed_now)
    assert low.anchor_adjustment == 0.6


def test_too_few_relevant_comps(base_valuation, fixed_now):
    sales = _comps(10_000)[:2] + [
        ComparableSale("zzqqxxwwvvkkjjhhggffdd.xyz", 50_000, sale_date="2001-01-01"),
        ComparableSale("qqqqwwwwzzzzxxxxvvvvbb.info", 50_000, sale_date="2002-05-05"),
    ]
    result = anchor_with_comps("cloudbank.com", base_valuation, sales, now=fixed_now)
    assert not result.comp_anchored
    assert (result.value_min, result.value_max) == (1_000, 3_000)
    assert result.comp_count == 0


def test_no_comps(base_valuation):
    result = anchor_with_comps("cloudbank.com", base_valuation, [])
    assert not result.comp_anchored
    assert result.band == base_valuation.band


def test_weighted_median():
    assert weighted_median([(100, 1), (200, 1), (300, 1)]) == 200
    assert weighted_median([(100, 1), (200, 1), (300, 5)]) == 300


def test_load_comparable_sales(tmp_path):
    listing = tmp_path / "comps.yaml"
    listing.write_text(
        "- domain_name: cloudpay.com\n  sale_price: 12000\n  sale_date: 2025-06-01\n"
        "- domain_name: paycloud.io\n  sale_price: 4000\n  venue: end-user\n",
        encoding="utf-8",
    )
    sales = load_comparable_sales(listing)
    assert [s.domain_name for s in sales] == ["cloudpay.com", "paycloud.io"]
    assert sales[0].sale_price == 12_000.0
    assert sales[0].sale_date == "2025-06-01"
    assert sales[1].venue == "end-user"

    wrapped = tmp_path / "comps.json"
    wrapped.write_text('{"sales": [{"domain_name": "a.com", "sale_price": 1}]}', encoding="utf-8")
    assert load_comparable_sales(wrapped)[0].domain_name == "a.com"


def test_load_comparable_sales_rejects_other_shapes(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("just a string\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_comparable_sales(path)


@pytest.mark.parametrize(
    "content",
    [
        "- 5\n- 7\n",
        "- domain_name: a.com\n",
        "- sale_price: 100\n",
        "- domain_name: a.com\n  sale_price: lots\n",
        "sales:\n  - [a.com, 100]\n",
    ],
)
def test_load_comparable_sales_rejects_malformed_records(tmp_path, content):
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_comparable_sales(path)


def test_sale_from_dict_rejects_scalar():
    with pytest.raises(ValueError, match="mapping"):
        ComparableSale.from_dict(5)
