import pathlib
import sys
from datetime import timedelta

import pytest
from pydantic import ValidationError

# Ensure repo root on sys.path for direct module imports when running tests locally.
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from warframe_status.models import Alert, Fissure, Language, Platform, VallisCycle


def test_platform_codes():
    assert [p.code for p in Platform] == ["pc", "ps4", "xb1", "swi"]
    assert str(Platform.XBOX) == "xb1"
    assert Platform.default() is Platform.PC


def test_language_codes():
    assert [lang.code for lang in Language] == [
        "en", "de", "es", "fr", "it", "ko", "pl", "pt", "ru", "zh", "uk",
    ]
    assert Language.default() is Language.ENGLISH


@pytest.mark.parametrize(
    "value, expected",
    [
        (Platform.PS4, Platform.PS4),
        ("swi", Platform.SWITCH),
        ("Switch", Platform.SWITCH),
        (" xb1 ", Platform.XBOX),
    ],
)
def test_platform_parse(value, expected):
    assert Platform.parse(value) is expected


@pytest.mark.parametrize("value", ["", "xbox360", None, 3])
def test_parse_rejects_unknown_values(value):
    with pytest.raises(ValueError):
        Platform.parse(value)


def test_alert_parses_camel_case_and_keeps_extra_keys():
    alert = Alert.model_validate(
        {
            "id": "a1",
            "activation": "2024-05-01T10:00:00.000Z",
            "mission": {
                "node": "Tolstoj (Mercury)",
                "minEnemyLevel": 10,
                "maxEnemyLevel": 15,
                "reward": {"countedItems": [{"count": 3, "type": "Nitain Extract"}]},
            },
            "tag": "Gift",
        }
    )

    assert alert.activation.utcoffset() == timedelta(0)
    assert alert.mission.max_enemy_level == 15
    assert alert.mission.reward.counted_items[0]["count"] == 3
    assert alert.model_extra["tag"] == "Gift"


def test_fissure_and_cycle_fields():
    fissure = Fissure.model_validate(
        {"id": "f1", "missionType": "Capture", "tierNum": 5, "isStorm": False, "isHard": True}
    )
    vallis = VallisCycle.model_validate({"id": "v1", "isWarm": True, "state": "warm", "timeLeft": "3m"})

    assert fissure.tier_num == 5
    assert fissure.is_hard is True
    assert vallis.is_warm is True
    assert vallis.time_left == "3m"


def test_missing_required_id_fails_validation():
    with pytest.raises(ValidationError):
        Alert.model_validate({"mission": {}})
