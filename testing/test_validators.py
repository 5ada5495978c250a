"""Input validation and the admin permission check."""

from unittest.mock import MagicMock

from battle_stats.constants import PLAYER_NAME_MAX_LENGTH
from battle_stats.utils import has_admin_permission, validate_counts, validate_player_name


def test_validate_counts_accepts_zero_and_positive():
    assert validate_counts(win=0, lose=3, games=10) == (True, "")


def test_validate_counts_names_the_bad_field():
    valid, error = validate_counts(win=1, lose=-2)
    assert not valid
    assert "lose" in error


def test_validate_player_name():
    assert validate_player_name("  Alice ")[0]
    assert not validate_player_name("   ")[0]
    assert not validate_player_name("x" * (PLAYER_NAME_MAX_LENGTH + 1))[0]


def test_has_admin_permission():
    interaction = MagicMock()
    interaction.user.guild_permissions.administrator = True
    assert has_admin_permission(interaction)

    interaction.user.guild_permissions.administrator = False
    assert not has_admin_permission(interaction)


def test_has_admin_permission_outside_guild():
    interaction = MagicMock()
    interaction.guild = None
    interaction.user.guild_permissions.administrator = True
    assert not has_admin_permission(interaction)
