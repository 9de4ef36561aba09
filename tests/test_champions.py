from stylemap.champions import (
    CHAMPION_STATIC_DATA,
    DEFAULT_PROFILE,
    NEUTRAL_COLOR,
    get_static_profile,
    role_color,
)


def test_known_champion_resolves_to_registry_profile() -> None:
    profile = get_static_profile("Thresh")
    assert profile.role == "Support"
    assert profile.range == "Melee"
    assert "Catcher" in profile.tags


def test_unknown_champion_gets_default_profile() -> None:
    profile = get_static_profile("NotAChampion")
    assert profile == DEFAULT_PROFILE
    assert profile.role == "Mid"
    assert profile.range == "Ranged"
    assert profile.resource == "Mana"
    assert profile.damage_type == "Magic"
    assert profile.complexity == 5
    assert profile.tags == ("Mage",)
    assert profile.play_pattern == "Control"
    assert get_static_profile("") == DEFAULT_PROFILE


def test_spaced_name_matches_canonical_entry() -> None:
    assert get_static_profile("Lee Sin") == CHAMPION_STATIC_DATA["LeeSin"]
    assert get_static_profile("leesin") == CHAMPION_STATIC_DATA["LeeSin"]


def test_registry_is_read_only() -> None:
    try:
        CHAMPION_STATIC_DATA["Ahri"] = DEFAULT_PROFILE  # type: ignore[index]
    except TypeError:
        pass
    else:
        raise AssertionError("registry accepted a write")


def test_role_color_falls_back_to_neutral() -> None:
    assert role_color("Top") == "#f97316"
    assert role_color("Coach") == NEUTRAL_COLOR


def test_registry_entries_pinned() -> None:
    viego = get_static_profile("Viego")
    assert viego.resource == "Mana"
    assert (viego.role, viego.range, viego.damage_type) == ("Jungle", "Melee", "Physical")
    assert get_static_profile("Katarina").resource == "None"
    assert get_static_profile("Renekton").resource == "Fury"
    assert get_static_profile("Sett").resource == "Grit"
    assert get_static_profile("Vladimir").resource == "Health"
