import pytest
from conftest import area

from pagasa_wikipedia.classifier import classify_signal_areas
from pagasa_wikipedia.context import RunContext
from pagasa_wikipedia.errors import BulletinError
from pagasa_wikipedia.models import AffectedArea, SignalAreas
from pagasa_wikipedia.renderer import (
    area_bullet,
    format_issued_time,
    province_link,
    region_header,
    signal_wikitext,
    signals_wikitext,
    warnings_table,
)


def _area(*args, **kwargs) -> AffectedArea:
    return AffectedArea.from_dict(area(*args, **kwargs))


# Region headers

def test_region_header_with_page_and_designation(regions) -> None:
    assert (
        region_header(regions[3])
        == "* '''[[Eastern Visayas (region)|Eastern Visayas]]''' {{small|(Region VIII)}}\n"
    )


def test_region_header_without_designation(regions) -> None:
    assert region_header(regions[2]) == "* '''[[Metro Manila]]''' \n"


def test_region_header_without_region() -> None:
    assert region_header(None) == "\n"


# Province links

def test_province_link_existing_page(context) -> None:
    assert province_link("Bukidnon", context) == "[[Bukidnon]]"
    assert context.issues == []


def test_province_link_disambiguated_page(regions) -> None:
    context = RunContext.create(regions, {"Cotabato (province)"})
    assert province_link("Cotabato", context) == "[[Cotabato (province)|Cotabato]]"
    assert context.issues == []


def test_province_link_missing_page_is_plain_text(context) -> None:
    assert province_link("Cotabato", context) == "Cotabato"
    assert len(context.issues) == 1
    assert context.issues[0].message == "Page not found for province: Cotabato"
    assert context.issues[0].context == {"province": "Cotabato"}


def test_province_link_metro_manila_and_islands(context) -> None:
    assert province_link("Metro Manila", context) == "[[Metro Manila]]"
    assert province_link("Calayan Island", context) == "[[Calayan Island]]"
    assert province_link("Babuyan Islands", context) == "[[Babuyan Islands]]"
    assert context.issues == []


def test_province_link_direct_title_preferred_over_disambiguation(regions) -> None:
    context = RunContext.create(regions, {"Samar", "Samar (province)"})
    assert province_link("Samar", context) == "[[Samar]]"


# Bullets

def test_bullet_whole_province(context) -> None:
    assert area_bullet(_area("Batanes"), context) == "** [[Batanes]]\n"
    assert area_bullet(_area("Batanes"), context, "*") == "* [[Batanes]]\n"


def test_bullet_mainland(context) -> None:
    bullet = area_bullet(_area("Cagayan", True, "mainland"), context)
    assert bullet == "** Mainland [[Cagayan]]\n"


def test_bullet_term_is_case_insensitive(context) -> None:
    assert area_bullet(_area("Cagayan", True, "Mainland"), context) == "** Mainland [[Cagayan]]\n"
    assert area_bullet(_area("Isabela", True, "REST"), context) == "** rest of [[Isabela]]\n"


def test_bullet_rest(context) -> None:
    assert area_bullet(_area("Isabela", True, "rest"), context) == "** rest of [[Isabela]]\n"


def test_bullet_other_term_with_municipalities(context) -> None:
    entry = _area("Leyte", True, "portion", "northern", ["Sta. Fe", "Albuena"])
    assert area_bullet(entry, context) == (
        "** northern portion of [[Leyte]] "
        "{{small|([[Santa Fe, Leyte|Sta. Fe]], [[Albuera, Leyte|Albuena]])}}\n"
    )


def test_bullet_other_term_without_municipalities(context) -> None:
    entry = _area("Leyte", True, "portion", "eastern")
    assert area_bullet(entry, context, "*") == "* eastern portion of [[Leyte]]\n"


def test_bullet_municipalities_link_raw_province_name(context) -> None:
    entry = _area("Samar", True, "portion", "western", ["Sto. Niño"])
    assert area_bullet(entry, context) == (
        "** western portion of [[Samar (province)|Samar]] "
        "{{small|([[Santo Niño, Samar|Sto. Niño]])}}\n"
    )


def test_bullet_part_without_includes_is_whole_province(context) -> None:
    assert area_bullet(_area("Batanes", True), context) == "** [[Batanes]]\n"


def test_bullet_includes_ignored_when_not_partial(context) -> None:
    entry = _area("Batanes", False, "mainland")
    assert area_bullet(entry, context) == "** [[Batanes]]\n"


# Signal sections

def test_signal_wikitext_unclassified_first_then_regions(context) -> None:
    signal = SignalAreas.from_dict(
        {
            "luzon": [area("Batanes"), area("Ilocos Norte"), area("Calayan Island")],
            "visayas": [area("Leyte")],
            "mindanao": [area("Bukidnon")],
        }
    )
    classified = classify_signal_areas(signal, context)

    assert signal_wikitext(classified, context) == (
        "\n"
        "\n"
        "* [[Calayan Island]]\n"
        "* '''[[Ilocos Region]]''' {{small|(Region I)}}\n"
        "** [[Ilocos Norte]]\n"
        "* '''[[Cagayan Valley]]''' {{small|(Region II)}}\n"
        "** [[Batanes]]\n"
        "* '''[[Eastern Visayas (region)|Eastern Visayas]]''' {{small|(Region VIII)}}\n"
        "** [[Leyte]]\n"
        "* '''[[Northern Mindanao]]''' {{small|(Region X)}}\n"
        "** [[Bukidnon]]\n"
    )


def test_signal_wikitext_without_data_is_empty(context) -> None:
    assert signal_wikitext(None, context) == ""


def test_signals_wikitext_covers_all_levels(context) -> None:
    signal = SignalAreas.from_dict({"luzon": [area("Batanes")]})
    sections = signals_wikitext({4: classify_signal_areas(signal, context)}, context)

    assert sorted(sections) == [1, 2, 3, 4, 5]
    assert sections[1] == sections[2] == sections[3] == sections[5] == ""
    assert sections[4] == "\n* '''[[Cagayan Valley]]''' {{small|(Region II)}}\n** [[Batanes]]\n"


# Timestamps and final table

@pytest.mark.parametrize(
    "issued, expected",
    [
        ("2020-11-01T06:00:00Z", "06:00 UTC (14:00 [[Philippine Standard Time|PHT]])"),
        ("2020-11-01T18:30:00+00:00", "18:30 UTC (02:30 [[Philippine Standard Time|PHT]])"),
        ("2020-11-01T20:00:00+08:00", "12:00 UTC (20:00 [[Philippine Standard Time|PHT]])"),
        ("2020-11-01T05:05:00", "05:05 UTC (13:05 [[Philippine Standard Time|PHT]])"),
    ],
)
def test_format_issued_time(issued, expected) -> None:
    assert format_issued_time(issued) == expected


def test_format_issued_time_rejects_garbage() -> None:
    with pytest.raises(BulletinError):
        format_issued_time("yesterday at noon")


def test_warnings_table_layout() -> None:
    signals = {1: "\n* [[Batanes]]\n", 2: "", 3: "", 4: "", 5: ""}
    table = warnings_table("2020-11-01T06:00:00Z", signals, "https://example.com/swb")

    assert table == (
        "{{TyphoonWarningsTable\n"
        "| PHtime = 06:00 UTC (14:00 [[Philippine Standard Time|PHT]])\n"
        "| PH5 = \n"
        "| PH4 = \n"
        "| PH3 = \n"
        "| PH2 = \n"
        "| PH1 = * [[Batanes]]\n"
        "| PHsource = [https://example.com/swb PAGASA]\n"
        "}}"
    )


def test_bullet_other_term_without_qualifier(context) -> None:
    entry = _area("Leyte", True, "islands")
    assert area_bullet(entry, context) == "** islands of [[Leyte]]\n"
