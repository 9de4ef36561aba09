from stylemap.normalize import (
    load_sample_records,
    records_from_json,
    records_from_player_stats,
    records_to_json,
)


def test_records_accept_camel_and_snake_keys() -> None:
    records = records_from_json(
        [
            {"championName": "Ahri", "games": 12, "winRate": 58.3, "avgKills": 7, "avgDeaths": 3,
             "avgAssists": 8, "avgCS": 200, "avgDamage": 21000},
            {"name": "Lux", "games": "5", "win_rate": 40, "avg_kills": 4, "avg_deaths": 5,
             "avg_assists": 11, "avg_cs": 150},
        ]
    )
    assert [r.name for r in records] == ["Ahri", "Lux"]
    assert records[0].avg_damage == 21000.0
    assert records[1].games == 5
    assert records[1].avg_damage is None


def test_records_without_name_are_skipped() -> None:
    records = records_from_json([{"games": 10}, "junk", {"championName": "Zed", "games": None}])
    assert [r.name for r in records] == ["Zed"]
    assert records[0].games == 0


def test_player_stats_split() -> None:
    records, duration = records_from_player_stats(
        {"topChampions": [{"championName": "Ahri", "games": 9}], "avgGameDuration": 29.5}
    )
    assert [r.name for r in records] == ["Ahri"]
    assert duration == 29.5

    _, missing = records_from_player_stats({"topChampions": []})
    assert missing is None


def test_sample_pool_round_trips() -> None:
    sample = load_sample_records()
    assert len(sample) == 12
    assert records_from_json(records_to_json(sample)) == sample
