from tzcompanion.modules.time_conversion.resolver import resolve_zones
from tzcompanion.modules.time_conversion.zones import ZONE_DIRECTORY, ZoneEntry

DIRECTORY = (
    ZoneEntry("Atlantis", "XA", ("Ocean/Atlantis", "Ocean/Poseidonia")),
    ZoneEntry("Lemuria", "XB", ("Ocean/Lemuria",)),
    ZoneEntry("Mu", "XC", ("Pacific/Mu_City", "Ocean/Atlantis_Annex")),
)


def test_country_code_returns_that_country_in_order():
    assert resolve_zones("XA", DIRECTORY) == ["Ocean/Atlantis", "Ocean/Poseidonia"]
    assert resolve_zones("xb", DIRECTORY) == ["Ocean/Lemuria"]
    assert resolve_zones("Xc", DIRECTORY) == ["Pacific/Mu_City", "Ocean/Atlantis_Annex"]


def test_country_name_match_includes_every_zone_plus_zone_name_hits():
    result = resolve_zones("atlantis", DIRECTORY)

    assert result == ["Ocean/Atlantis", "Ocean/Poseidonia", "Ocean/Atlantis_Annex"]


def test_country_name_match_does_not_duplicate_own_zones():
    # "Atlantis" is both the country name and part of its first zone id
    result = resolve_zones("Atlantis", DIRECTORY)

    assert result.count("Ocean/Atlantis") == 1


def test_spaces_match_underscores_in_zone_ids():
    assert resolve_zones("mu city", DIRECTORY) == ["Pacific/Mu_City"]
    assert resolve_zones("CITY", DIRECTORY) == ["Pacific/Mu_City"]


def test_no_match_returns_empty_list():
    assert resolve_zones("narnia", DIRECTORY) == []


def test_empty_query_matches_everything():
    every_zone = [z for entry in DIRECTORY for z in entry.zone_ids]

    assert resolve_zones("", DIRECTORY) == every_zone


def test_space_query_matches_underscored_zones():
    assert resolve_zones(" ", DIRECTORY) == ["Pacific/Mu_City", "Ocean/Atlantis_Annex"]


def test_real_directory_lookups():
    assert resolve_zones("JP") == ["Asia/Tokyo"]
    assert resolve_zones("japan") == ["Asia/Tokyo"]
    assert resolve_zones("new york") == ["America/New_York"]
    assert resolve_zones("Germany") == ["Europe/Berlin", "Europe/Busingen"]


def test_real_directory_country_name_takes_all_zones():
    us = next(e for e in ZONE_DIRECTORY if e.country_code == "US")

    assert resolve_zones("United States") == list(us.zone_ids)
    assert len(us.zone_ids) > 10
