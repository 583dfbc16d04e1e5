import pytest

from adsort.ad import Ad, ContentFlags
from adsort.loader import load_ads, parse_ads

SAMPLE = """[
  {
    "Year": 2000,
    "Brand": "Doritos",
    "Funny": true,
    "Product": false,
    "Patriotic": false,
    "Celebrity": true,
    "Danger": false,
    "Animals": false,
    "Sexual": false,
    "Views": 1500,
    "Likes": 30,
    "Dislikes": 4,
    "Title": "Crunch Time"
  },
  {
    "Year": 2005,
    "Brand": "Bud Light",
    "Funny": false,
    "Product": true,
    "Patriotic": false,
    "Celebrity": false,
    "Danger": true,
    "Animals": true,
    "Sexual": false,
    "Views": 42,
    "Likes": 1,
    "Dislikes": 0,
    "Title": "Horses"
  }
]
"""


def test_parse_sample():
    ads = parse_ads(SAMPLE.splitlines())
    assert ads == [
        Ad(
            year=2000,
            brand="Doritos",
            content=ContentFlags(funny=True, celebrity=True),
            views=1500,
            likes=30,
            dislikes=4,
            title="Crunch Time",
        ),
        Ad(
            year=2005,
            brand="Bud Light",
            content=ContentFlags(product=True, danger=True, animals=True),
            views=42,
            likes=1,
            dislikes=0,
            title="Horses",
        ),
    ]


def test_ad_without_title_is_dropped():
    lines = ['"Year": 2001,', '"Brand": "Pepsi",', '"Views": 10,']
    assert parse_ads(lines) == []


def test_year_resets_previous_fields():
    lines = [
        '"Year": 2001,',
        '"Brand": "Pepsi",',
        '"Funny": true,',
        '"Title": "First"',
        '"Year": 2002,',
        '"Title": "Second"',
    ]
    first, second = parse_ads(lines)
    assert first.brand == "Pepsi" and first.content.funny
    assert second == Ad(year=2002, title="Second")


def test_fields_carry_over_without_year():
    lines = ['"Year": 2003,', '"Brand": "Kia",', '"Title": "One"', '"Title": "Two"']
    ads = parse_ads(lines)
    assert [ad.title for ad in ads] == ["One", "Two"]
    assert all(ad.brand == "Kia" and ad.year == 2003 for ad in ads)


def test_invalid_number_raises():
    with pytest.raises(ValueError):
        parse_ads(['"Views": null,'])


def test_out_of_range_number_raises():
    with pytest.raises(ValueError):
        parse_ads(['"Views": 99999999999,'])


def test_unquoted_brand_is_empty():
    (ad,) = parse_ads(['"Brand": 12,', '"Title": "X"'])
    assert ad.brand == ""


def test_load_ads_from_file(tmp_path):
    path = tmp_path / "ads.json"
    path.write_text(SAMPLE, encoding="utf-8")
    ads = load_ads(path)
    assert [ad.title for ad in ads] == ["Crunch Time", "Horses"]


def test_load_ads_windows_line_endings(tmp_path):
    path = tmp_path / "ads.json"
    path.write_bytes(SAMPLE.replace("\n", "\r\n").encode("utf-8"))
    ads = load_ads(path)
    assert [ad.views for ad in ads] == [1500, 42]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_ads(tmp_path / "missing.json")